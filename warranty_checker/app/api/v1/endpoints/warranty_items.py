"""
Warranty item management endpoints for API v1.

Administrators create and edit warranty records here; the public form
only reads them.  Every route requires the ``ADMIN_TOKEN`` bearer token.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from warranty_checker.app.core.security import require_admin
from warranty_checker.app.schemas.warranty import (
    WarrantyItemCreate,
    WarrantyItemRead,
    WarrantyItemUpdate,
)
from warranty_checker.app.services.warranty_service import WarrantyService

router = APIRouter(dependencies=[Depends(require_admin)])


def get_warranty_service(request: Request) -> WarrantyService:
    return request.app.state.warranty_service


@router.get("/", response_model=List[WarrantyItemRead])
async def list_warranty_items(
    limit: int = Query(100, ge=1, le=1000),
    offset: int = Query(0, ge=0),
    service: WarrantyService = Depends(get_warranty_service),
) -> List[WarrantyItemRead]:
    """Return warranty items ordered by id."""
    return await service.list_items(limit=limit, offset=offset)


@router.get("/{item_id}", response_model=WarrantyItemRead)
async def get_warranty_item(
    item_id: int,
    service: WarrantyService = Depends(get_warranty_service),
) -> WarrantyItemRead:
    item = await service.get_item(item_id)
    if item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Warranty item not found")
    return item


@router.post("/", response_model=WarrantyItemRead, status_code=status.HTTP_201_CREATED)
async def create_warranty_item(
    item_in: WarrantyItemCreate,
    service: WarrantyService = Depends(get_warranty_service),
) -> WarrantyItemRead:
    return await service.create_item(item_in)


@router.put("/{item_id}", response_model=WarrantyItemRead)
async def update_warranty_item(
    item_id: int,
    item_in: WarrantyItemUpdate,
    service: WarrantyService = Depends(get_warranty_service),
) -> WarrantyItemRead:
    """Update the provided fields of a warranty item."""
    item = await service.update_item(item_id, item_in)
    if item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Warranty item not found")
    return item


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_warranty_item(
    item_id: int,
    service: WarrantyService = Depends(get_warranty_service),
) -> None:
    deleted = await service.delete_item(item_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Warranty item not found")
    return None
