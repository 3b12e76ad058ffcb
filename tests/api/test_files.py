"""Files API tests: CRUD, list, batch and cache behaviour over HTTP."""

import pytest
from fastapi import FastAPI
from httpx import AsyncClient


async def _create(client: AsyncClient, **overrides) -> int:
    body = {"filename": "a.txt", "url": "/files/a.txt", "size": 12, "mime_type": "text/plain"}
    body.update(overrides)
    response = await client.post("/api/v1/files", json=body)
    assert response.status_code == 201
    return response.json()["id"]


async def test_create_then_get(client: AsyncClient) -> None:
    record_id = await _create(client)
    response = await client.get(f"/api/v1/files/{record_id}")
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == record_id
    assert data["filename"] == "a.txt"
    assert data["size"] == 12


async def test_get_unknown_id_is_404(client: AsyncClient) -> None:
    response = await client.get("/api/v1/files/5")
    assert response.status_code == 404
    assert response.json()["error"] == "RECORD_NOT_FOUND"
    # second read is answered by the placeholder
    assert (await client.get("/api/v1/files/5")).status_code == 404


async def test_get_id_zero_is_400(client: AsyncClient) -> None:
    response = await client.get("/api/v1/files/0")
    assert response.status_code == 400
    assert response.json()["error"] == "VALIDATION_ERROR"


async def test_non_numeric_id_is_422(client: AsyncClient) -> None:
    assert (await client.get("/api/v1/files/abc")).status_code == 422


async def test_update_is_sparse_and_returns_fresh_record(client: AsyncClient) -> None:
    record_id = await _create(client)
    await client.get(f"/api/v1/files/{record_id}")

    response = await client.put(f"/api/v1/files/{record_id}", json={"size": 100, "url": ""})

    assert response.status_code == 200
    data = response.json()
    assert data["size"] == 100
    assert data["url"] == "/files/a.txt"
    assert data["filename"] == "a.txt"


async def test_update_unknown_id_is_404(client: AsyncClient) -> None:
    response = await client.put("/api/v1/files/77", json={"size": 1})
    assert response.status_code == 404


async def test_create_rejects_unknown_fields(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/files", json={"filename": "a", "url": "/a", "owner": "bob"}
    )
    assert response.status_code == 422


async def test_delete_then_get_is_404(client: AsyncClient) -> None:
    record_id = await _create(client)
    await client.get(f"/api/v1/files/{record_id}")

    response = await client.delete(f"/api/v1/files/{record_id}")

    assert response.status_code == 204
    assert (await client.get(f"/api/v1/files/{record_id}")).status_code == 404


async def test_list_filters_and_counts(client: AsyncClient) -> None:
    for i in range(1, 6):
        await _create(client, filename=f"f{i}.txt", size=i)
    response = await client.post(
        "/api/v1/files/list",
        json={
            "page": 0,
            "limit": 2,
            "sort": "size",
            "columns": [{"name": "size", "exp": "gt", "value": 1}],
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 4
    assert [item["size"] for item in data["items"]] == [2, 3]


async def test_list_rejects_unknown_column(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/files/list", json={"columns": [{"name": "nope", "value": 1}]}
    )
    assert response.status_code == 400
    assert response.json()["error"] == "QUERY_PARAMS_ERROR"


async def test_batch_returns_existing_in_request_order(client: AsyncClient) -> None:
    first = await _create(client, filename="1.txt")
    second = await _create(client, filename="2.txt")
    response = await client.post("/api/v1/files/batch", json={"ids": [second, 99, first]})
    assert response.status_code == 200
    assert [item["id"] for item in response.json()] == [second, first]


async def test_reads_are_cached(client: AsyncClient, app: FastAPI) -> None:
    record_id = await _create(client)
    await client.get(f"/api/v1/files/{record_id}")
    cached = await app.state.cache.get(f"files:{record_id}")
    assert cached["filename"] == "a.txt"


@pytest.mark.parametrize("record_id", [2**63 - 1, 2**63, 2**64 - 1])
async def test_large_unsigned_ids_are_not_found(client: AsyncClient, record_id: int) -> None:
    response = await client.get(f"/api/v1/files/{record_id}")
    assert response.status_code == 404
    assert response.json()["error"] == "RECORD_NOT_FOUND"

    assert (await client.put(f"/api/v1/files/{record_id}", json={"size": 1})).status_code == 404
    assert (await client.delete(f"/api/v1/files/{record_id}")).status_code == 204


async def test_id_above_unsigned_range_is_400(client: AsyncClient) -> None:
    response = await client.get(f"/api/v1/files/{2**64}")
    assert response.status_code == 400
    assert response.json()["error"] == "VALIDATION_ERROR"


async def test_batch_with_large_unsigned_ids_skips_them(client: AsyncClient) -> None:
    record_id = await _create(client)
    response = await client.post(
        "/api/v1/files/batch", json={"ids": [record_id, 2**63, 2**64 - 1]}
    )
    assert response.status_code == 200
    assert [r["id"] for r in response.json()] == [record_id]


async def test_join_key_above_store_range_is_400(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/user-roles", json={"user_id": 2**63, "role_id": 1}
    )
    assert response.status_code == 400
    assert response.json()["error"] == "VALIDATION_ERROR"


async def test_filter_value_above_store_range_is_400(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/files/list",
        json={"columns": [{"name": "id", "value": 2**64 - 1}]},
    )
    assert response.status_code == 400
    assert response.json()["error"] == "QUERY_PARAMS_ERROR"
