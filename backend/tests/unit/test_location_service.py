"""Unit tests: LocationService (repository calls patched out)."""
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest
from sqlalchemy.exc import OperationalError

from schemas.locations import LocationCreate, LocationResponse
from services.location_service import FailureKind, LocationService

pytestmark = pytest.mark.unit

DRAFT = LocationCreate(name="Home", latitude=10, longitude=20, address="1 Main St")


def _stored_row(document: dict) -> SimpleNamespace:
    """What insert_location hands back: the document plus storage-internal fields."""
    return SimpleNamespace(id=7, version=1, **document)


def test_create_location_inserts_document_with_fresh_cuid():
    """create_location passes a document with a generated cuid and the draft fields."""
    with patch("services.location_service.repo_insert_location", side_effect=lambda s, d: _stored_row(d)) as mock_insert:
        LocationService(MagicMock()).create_location(DRAFT)
    document = mock_insert.call_args[0][1]
    assert isinstance(document["cuid"], str) and document["cuid"]
    assert document["name"] == "Home"
    assert document["latitude"] == 10
    assert document["longitude"] == 20
    assert document["address"] == "1 Main St"


def test_create_location_returns_only_public_fields():
    """The created location carries cuid and the draft fields, no id or version."""
    with patch("services.location_service.repo_insert_location", side_effect=lambda s, d: _stored_row(d)):
        result = LocationService(MagicMock()).create_location(DRAFT)
    assert result.ok
    data = result.value.model_dump()
    assert set(data) == {"cuid", "name", "latitude", "longitude", "address"}
    assert data["name"] == "Home" and data["address"] == "1 Main St"


def test_create_location_generates_distinct_cuids():
    """Two creates never share a cuid."""
    with patch("services.location_service.repo_insert_location", side_effect=lambda s, d: _stored_row(d)):
        service = LocationService(MagicMock())
        first = service.create_location(DRAFT).value
        second = service.create_location(DRAFT).value
    assert first.cuid != second.cuid


def test_get_locations_asks_for_projection_without_internal_fields():
    """get_locations excludes id and version at the query level."""
    docs = [
        {"cuid": "c1", "name": "One", "latitude": 1.0, "longitude": 2.0, "address": "A1"},
        {"cuid": "c2", "name": "Two", "latitude": 3.0, "longitude": 4.0, "address": "A2"},
    ]
    with patch("services.location_service.repo_find_locations", return_value=docs) as mock_find:
        result = LocationService(MagicMock()).get_locations()
    assert mock_find.call_args.kwargs["exclude"] == ("id", "version")
    assert result.ok
    assert result.value == [LocationResponse(**d) for d in docs]


def test_delete_location_passes_cuid():
    """delete_location deletes by the given cuid."""
    session = MagicMock()
    with patch("services.location_service.repo_delete_location", return_value=True) as mock_delete:
        result = LocationService(session).delete_location("c-del")
    mock_delete.assert_called_once_with(session, "c-del")
    assert result.ok and result.value is None


def test_delete_location_missing_is_ok():
    """No matching row is still a success."""
    with patch("services.location_service.repo_delete_location", return_value=False):
        result = LocationService(MagicMock()).delete_location("c-none")
    assert result.ok


def test_storage_error_becomes_storage_failure_and_rolls_back():
    """SQLAlchemy errors are returned as a STORAGE failure and the session is rolled back."""
    session = MagicMock()
    error = OperationalError("SELECT 1", {}, Exception("database is locked"))
    with patch("services.location_service.repo_find_locations", side_effect=error):
        result = LocationService(session).get_locations()
    assert not result.ok
    assert result.failure.kind is FailureKind.STORAGE
    assert result.failure.error is error
    assert result.failure.operation == "get_locations"
    session.rollback.assert_called_once()


def test_other_error_becomes_unexpected_failure():
    """Any other exception is returned as an UNEXPECTED failure."""
    with patch("services.location_service.repo_delete_location", side_effect=RuntimeError("boom")):
        result = LocationService(MagicMock()).delete_location("c-err")
    assert not result.ok
    assert result.failure.kind is FailureKind.UNEXPECTED
    assert str(result.failure.error) == "boom"
