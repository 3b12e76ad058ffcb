"""CRUD router builder shared by every entity endpoint module.

Routes (relative to the entity prefix):
    POST ""          create, 201 {"id": n}
    GET  /{id}       get by id (cache-aside read)
    PUT  /{id}       sparse update, returns the fresh record
    DELETE /{id}     delete, 204
    POST /list       filtered page {"items": [...], "total": n}
    POST /batch      get by ids, in request order, missing ids left out
"""

from collections.abc import Callable
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel

from app.infrastructure.persistence.repositories import CachedRepository
from app.schemas.common import BatchRequest, CreatedResponse, ListRequest


def build_crud_router(
    get_repo: Callable[..., CachedRepository[Any]],
    *,
    create_model: type[BaseModel],
    update_model: type[BaseModel],
    response_model: type[BaseModel],
    list_model: type[BaseModel],
) -> APIRouter:
    """Return an APIRouter with the standard routes for one entity."""
    router = APIRouter()
    Repo = Annotated[CachedRepository[Any], Depends(get_repo)]

    @router.post("", response_model=CreatedResponse, status_code=201)
    async def create(body: create_model, repo: Repo) -> CreatedResponse:  # type: ignore[valid-type]
        """Create a record; the cache is not pre-populated."""
        record_id = await repo.create(body.model_dump())  # type: ignore[attr-defined]
        return CreatedResponse(id=record_id)

    @router.get("/{record_id}", response_model=response_model)
    async def get_by_id(record_id: int, repo: Repo) -> Any:
        """Get one record; 404 when it does not exist, 400 for id 0."""
        return response_model.model_validate(await repo.get_by_id(record_id))

    @router.put("/{record_id}", response_model=response_model)
    async def update_by_id(
        record_id: int,
        body: update_model,  # type: ignore[valid-type]
        repo: Repo,
    ) -> Any:
        """Apply the non-empty fields of body, then return the stored record."""
        await repo.update_by_id(record_id, body.model_dump(exclude_none=True))  # type: ignore[attr-defined]
        return response_model.model_validate(await repo.get_by_id(record_id))

    @router.delete("/{record_id}", status_code=204)
    async def delete_by_id(record_id: int, repo: Repo) -> Response:
        await repo.delete_by_id(record_id)
        return Response(status_code=204)

    @router.post("/list", response_model=list_model)
    async def list_records(body: ListRequest, repo: Repo) -> Any:
        """Filtered, sorted page of records (always read from the store)."""
        items, total = await repo.get_by_columns(body.to_params())
        return list_model.model_validate(
            {
                "items": [response_model.model_validate(r) for r in items],
                "total": total,
            }
        )

    @router.post("/batch", response_model=list[response_model])  # type: ignore[valid-type]
    async def get_by_ids(body: BatchRequest, repo: Repo) -> Any:
        """Records for the requested ids that exist."""
        return [
            response_model.model_validate(r) for r in await repo.get_by_ids(body.ids)
        ]

    return router
