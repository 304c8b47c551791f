"""
Church endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from services.directory import ChurchService

from ..dependencies import get_church_service
from ..schemas.church import Church, ChurchCreate, ChurchUpdate

router = APIRouter(prefix="/churches", tags=["churches"])

Service = Annotated[ChurchService, Depends(get_church_service)]


@router.get("", response_model=list[Church])
def list_churches(svc: Service):
    return svc.list_churches()


@router.post("", response_model=Church, status_code=status.HTTP_201_CREATED)
def create_church(data: ChurchCreate, svc: Service):
    return svc.create_church(data)


@router.patch("/{church_id}", response_model=Church)
def patch_church(church_id: str, data: ChurchUpdate, svc: Service):
    return svc.patch_church(church_id, data)


@router.delete("/{church_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_church(church_id: str, svc: Service):
    """Delete the church and every event it owns."""
    svc.delete_church(church_id)
