"""Record (de)serialization for cache values.

Records are frozen dataclasses. They are cached as plain dicts; datetime
fields (named *_at) travel as ISO strings and are parsed back on read.
"""

from dataclasses import asdict, fields
from datetime import datetime
from typing import Any, TypeVar

RecordT = TypeVar("RecordT")


def record_to_dict(record: Any) -> dict[str, Any]:
    """Serialize a record dataclass to a JSON-compatible dict."""
    data = asdict(record)
    for name, value in data.items():
        if isinstance(value, datetime):
            data[name] = value.isoformat()
    return data


def record_from_dict(record_type: type[RecordT], cached: dict[str, Any]) -> RecordT:
    """Build a record from a cache dict; unknown keys are ignored.

    Raises:
        TypeError: If a required field is missing from the dict.
    """
    data: dict[str, Any] = {}
    for f in fields(record_type):  # type: ignore[arg-type]
        if f.name not in cached:
            continue
        value = cached[f.name]
        if f.name.endswith("_at") and isinstance(value, str):
            value = datetime.fromisoformat(value)
        data[f.name] = value
    return record_type(**data)
