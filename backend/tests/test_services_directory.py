"""
Tests for ChurchService and ResourceService.
"""

import pytest
from app.models.birthday import Birthday
from app.models.event import Event
from app.schemas.church import ChurchCreate, ChurchUpdate
from app.schemas.resource import ResourceCreate, ResourceUpdate
from services.directory import ChurchService, ResourceService
from services.errors import ConflictError, NotFoundError
from tests.conftest import make_birthday, make_event, make_resource


@pytest.fixture
def churches(repo) -> ChurchService:
    return ChurchService(repo)


@pytest.fixture
def resources(repo) -> ResourceService:
    return ResourceService(repo)


class TestChurchService:
    """Tests for church management."""

    def test_create_and_list(self, churches):
        """Created churches are listed by name."""
        churches.create_church(ChurchCreate(name="North"))
        churches.create_church(ChurchCreate(name="Central", color_code="#3498db"))

        assert [c.name for c in churches.list_churches()] == ["Central", "North"]

    def test_duplicate_name_ignores_case(self, churches):
        """Names are unique regardless of case."""
        churches.create_church(ChurchCreate(name="Central"))

        with pytest.raises(ConflictError):
            churches.create_church(ChurchCreate(name="CENTRAL"))

    def test_rename_to_existing_name(self, churches):
        """Renaming onto another church's name is a conflict."""
        churches.create_church(ChurchCreate(name="Central"))
        north = churches.create_church(ChurchCreate(name="North"))

        with pytest.raises(ConflictError):
            churches.patch_church(north.id, ChurchUpdate(name="central"))

    def test_rename_keeping_own_name(self, churches):
        """Changing only the case of its own name is allowed."""
        church = churches.create_church(ChurchCreate(name="central"))

        assert churches.patch_church(church.id, ChurchUpdate(name="Central")).name == "Central"

    def test_delete_removes_events(self, churches, church, db_session):
        """Deleting a church deletes its events."""
        db_session.add(make_event("e1"))
        db_session.flush()

        churches.delete_church(church.id)

        assert db_session.get(Event, "e1") is None
        with pytest.raises(NotFoundError):
            churches.get_church(church.id)

    def test_delete_unscopes_birthdays(self, churches, church, db_session):
        """Birthdays of a deleted church remain, without a church."""
        db_session.add(make_birthday("b1", church_id=church.id))
        db_session.flush()

        churches.delete_church(church.id)
        db_session.expire_all()

        assert db_session.get(Birthday, "b1").church_id is None


class TestResourceService:
    """Tests for resource management."""

    def test_create_defaults_to_available(self, resources):
        """New resources are available unless told otherwise."""
        resource = resources.create_resource(ResourceCreate(name="Projector"))

        assert resource.is_available is True
        assert resource.kind is None

    def test_duplicate_name_ignores_case(self, resources):
        """Names are unique regardless of case."""
        resources.create_resource(ResourceCreate(name="Main Hall"))

        with pytest.raises(ConflictError):
            resources.create_resource(ResourceCreate(name="main hall"))

    def test_patch_availability(self, resources):
        """Availability can be toggled."""
        resource = resources.create_resource(ResourceCreate(name="Projector"))

        assert resources.patch_resource(resource.id, ResourceUpdate(is_available=False)).is_available is False

    def test_delete_moves_events_to_main_space(self, resources, church, db_session):
        """Events booked on a deleted resource fall back to the main space."""
        db_session.add(make_resource("room-1"))
        db_session.flush()
        db_session.add(make_event("e1", resource_id="room-1"))
        db_session.flush()

        resources.delete_resource("room-1")
        db_session.expire_all()

        assert db_session.get(Event, "e1").resource_id is None

    def test_delete_unknown(self, resources):
        """Deleting a missing resource raises NotFoundError."""
        with pytest.raises(NotFoundError):
            resources.delete_resource("missing")
