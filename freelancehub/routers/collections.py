"""
Generic record endpoints — BaseCrudService exposed over HTTP.
Store failures are translated to HTTP errors by the handlers in main.py.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status

from freelancehub.dependencies import get_crud_service
from freelancehub.domain.collections import KNOWN_COLLECTIONS
from freelancehub.domain.models import RecordPage
from freelancehub.services.crud_service import BaseCrudService

router = APIRouter(prefix="/collections", tags=["Collections"])


def _known(collection_id: str) -> str:
    if collection_id not in KNOWN_COLLECTIONS:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown collection: {collection_id}",
        )
    return collection_id


@router.get("/{collection_id}", response_model=RecordPage)
async def list_records(
    collection_id: str,
    include: list[str] | None = Query(None),
    skip: int = Query(0, ge=0),
    limit: int | None = Query(None, ge=1, le=1000),
    crud: BaseCrudService = Depends(get_crud_service),
):
    """One page of a collection; `include` embeds referenced records."""
    return await crud.get_all(_known(collection_id), include, skip=skip, limit=limit)


@router.get("/{collection_id}/{item_id}")
async def get_record(
    collection_id: str,
    item_id: str,
    include: list[str] | None = Query(None),
    crud: BaseCrudService = Depends(get_crud_service),
) -> dict[str, Any]:
    record = await crud.get_by_id(_known(collection_id), item_id, include)
    if record is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No record '{item_id}' in {collection_id}",
        )
    return record


@router.post("/{collection_id}", status_code=status.HTTP_201_CREATED)
async def create_record(
    collection_id: str,
    record: dict[str, Any] = Body(...),
    crud: BaseCrudService = Depends(get_crud_service),
) -> dict[str, Any]:
    return await crud.create(_known(collection_id), record)


@router.put("/{collection_id}/{item_id}")
async def update_record(
    collection_id: str,
    item_id: str,
    record: dict[str, Any] = Body(...),
    crud: BaseCrudService = Depends(get_crud_service),
) -> dict[str, Any]:
    """The path ID wins over any `_id` in the body."""
    return await crud.update(_known(collection_id), {**record, "_id": item_id})


@router.delete("/{collection_id}/{item_id}")
async def delete_record(
    collection_id: str,
    item_id: str,
    crud: BaseCrudService = Depends(get_crud_service),
) -> dict[str, str]:
    removed = await crud.delete(_known(collection_id), item_id)
    return {"_id": removed}
