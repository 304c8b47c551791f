"""
Resource endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from services.directory import ResourceService

from ..dependencies import get_resource_service
from ..schemas.resource import Resource, ResourceCreate, ResourceUpdate

router = APIRouter(prefix="/resources", tags=["resources"])

Service = Annotated[ResourceService, Depends(get_resource_service)]


@router.get("", response_model=list[Resource])
def list_resources(svc: Service):
    return svc.list_resources()


@router.post("", response_model=Resource, status_code=status.HTTP_201_CREATED)
def create_resource(data: ResourceCreate, svc: Service):
    return svc.create_resource(data)


@router.patch("/{resource_id}", response_model=Resource)
def patch_resource(resource_id: str, data: ResourceUpdate, svc: Service):
    return svc.patch_resource(resource_id, data)


@router.delete("/{resource_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_resource(resource_id: str, svc: Service):
    """Delete the resource; its events fall back to the main space."""
    svc.delete_resource(resource_id)
