"""Application layer: record DTOs and list-query parameters.

No ORM or web framework imports; the cache stores these types.
"""
