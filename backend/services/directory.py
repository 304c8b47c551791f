"""
Service layer for the reference data events point at: churches and
resources. Names are unique regardless of case.
"""

from typing import Any
from uuid import uuid4

import utils.logging
from app.models.church import Church
from app.models.resource import Resource
from app.schemas.church import ChurchCreate, ChurchUpdate
from app.schemas.resource import ResourceCreate, ResourceUpdate
from services.errors import ConflictError, NotFoundError, ValidationError
from services.repository import CalendarRepository

logger = utils.logging.get_logger(__name__)


class ChurchService:
    def __init__(self, repo: CalendarRepository):
        self.repo = repo

    def list_churches(self) -> list[Church]:
        return self.repo.all_churches()

    def get_church(self, church_id: str) -> Church:
        church = self.repo.get(Church, church_id)
        if church is None:
            raise NotFoundError("Church", church_id)
        return church

    def create_church(self, data: ChurchCreate) -> Church:
        if self.repo.find_by_name(Church, data.name) is not None:
            raise ConflictError(f"A church named {data.name} already exists")
        church = Church(id=str(uuid4()), **data.model_dump())
        self.repo.add(church)
        self.repo.commit()
        logger.info(f"Created church {church.id}")
        return church

    def patch_church(self, church_id: str, data: ChurchUpdate) -> Church:
        church = self.get_church(church_id)
        changes: dict[str, Any] = data.model_dump(exclude_unset=True)
        if "name" in changes:
            if changes["name"] is None:
                raise ValidationError("name cannot be null")
            existing = self.repo.find_by_name(Church, changes["name"])
            if existing is not None and existing.id != church_id:
                raise ConflictError(f"A church named {changes['name']} already exists")
        for name, value in changes.items():
            setattr(church, name, value)
        self.repo.commit()
        return church

    def delete_church(self, church_id: str) -> None:
        """Delete a church together with all of its events."""
        church = self.get_church(church_id)
        self.repo.delete_church_events(church_id)
        self.repo.delete(church)
        self.repo.commit()
        logger.info(f"Deleted church {church_id} and its events")


class ResourceService:
    def __init__(self, repo: CalendarRepository):
        self.repo = repo

    def list_resources(self) -> list[Resource]:
        return self.repo.all_resources()

    def get_resource(self, resource_id: str) -> Resource:
        resource = self.repo.get(Resource, resource_id)
        if resource is None:
            raise NotFoundError("Resource", resource_id)
        return resource

    def create_resource(self, data: ResourceCreate) -> Resource:
        if self.repo.find_by_name(Resource, data.name) is not None:
            raise ConflictError(f"A resource named {data.name} already exists")
        resource = Resource(id=str(uuid4()), **data.model_dump())
        self.repo.add(resource)
        self.repo.commit()
        logger.info(f"Created resource {resource.id}")
        return resource

    def patch_resource(self, resource_id: str, data: ResourceUpdate) -> Resource:
        resource = self.get_resource(resource_id)
        changes: dict[str, Any] = data.model_dump(exclude_unset=True)
        for required in ("name", "is_available"):
            if required in changes and changes[required] is None:
                raise ValidationError(f"{required} cannot be null")
        if "name" in changes:
            existing = self.repo.find_by_name(Resource, changes["name"])
            if existing is not None and existing.id != resource_id:
                raise ConflictError(f"A resource named {changes['name']} already exists")
        for name, value in changes.items():
            setattr(resource, name, value)
        self.repo.commit()
        return resource

    def delete_resource(self, resource_id: str) -> None:
        """
        Delete a resource. Events booked on it stay, moved to the main space.
        """
        resource = self.get_resource(resource_id)
        self.repo.release_resource(resource_id)
        self.repo.delete(resource)
        self.repo.commit()
        logger.info(f"Deleted resource {resource_id}")
