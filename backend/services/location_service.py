"""Location service: CRUD facade over the location repository.

Does no input validation; the API layer validates before calling in.
Every operation returns a ServiceResult instead of raising, so callers can
branch on the failure kind.
"""
import logging
import uuid
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models.location import INTERNAL_FIELDS
from repositories.location_repository import delete_location as repo_delete_location
from repositories.location_repository import find_locations as repo_find_locations
from repositories.location_repository import insert_location as repo_insert_location
from schemas.locations import LocationCreate, LocationResponse

LOG = logging.getLogger(__name__)

T = TypeVar("T")


class FailureKind(str, Enum):
    """Why a service operation failed."""

    STORAGE = "storage"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class ServiceFailure:
    operation: str
    kind: FailureKind
    error: Exception


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    """Either a value (ok) or a failure."""

    value: Optional[T] = None
    failure: Optional[ServiceFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None


def new_cuid() -> str:
    """Mint a fresh public identifier for a location."""
    return str(uuid.uuid4())


class LocationService:
    """Create, list and delete locations for one DB session."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def create_location(self, draft: LocationCreate) -> ServiceResult[LocationResponse]:
        """Insert a new location with a generated cuid and return its public fields."""

        def _create() -> LocationResponse:
            loc = repo_insert_location(
                self._session,
                {
                    "cuid": new_cuid(),
                    "name": draft.name,
                    "latitude": draft.latitude,
                    "longitude": draft.longitude,
                    "address": draft.address,
                },
            )
            return LocationResponse(
                cuid=loc.cuid,
                name=loc.name,
                latitude=loc.latitude,
                longitude=loc.longitude,
                address=loc.address,
            )

        return self._run("create_location", _create)

    def get_locations(self) -> ServiceResult[list[LocationResponse]]:
        """Return all locations; internal columns are excluded by the query."""

        def _list() -> list[LocationResponse]:
            documents = repo_find_locations(self._session, exclude=INTERNAL_FIELDS)
            return [LocationResponse(**doc) for doc in documents]

        return self._run("get_locations", _list)

    def delete_location(self, cuid: str) -> ServiceResult[None]:
        """Delete the location with this cuid. Deleting an unknown cuid is not an error."""

        def _delete() -> None:
            if not repo_delete_location(self._session, cuid):
                LOG.debug("delete_location: no location with cuid=%s", cuid)

        return self._run("delete_location", _delete)

    def _run(self, operation: str, fn: Callable[[], T]) -> ServiceResult[T]:
        try:
            return ServiceResult(value=fn())
        except SQLAlchemyError as e:
            self._session.rollback()
            return ServiceResult(failure=ServiceFailure(operation, FailureKind.STORAGE, e))
        except Exception as e:
            return ServiceResult(failure=ServiceFailure(operation, FailureKind.UNEXPECTED, e))
