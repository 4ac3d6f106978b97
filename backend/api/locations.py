"""Location API routes: list, create, delete."""
import logging
from typing import Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.orm import Session

from db import get_db
from schemas.locations import ErrorResponse, LocationCreate, LocationResponse
from services.location_service import FailureKind, LocationService, ServiceResult

LOG = logging.getLogger(__name__)

MISSING_FIELDS_ERROR = "Missing required fields"
GENERIC_ERROR = "Something went wrong"

router = APIRouter(prefix="/location", tags=["locations"])

_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


def get_location_service(db: Session = Depends(get_db)) -> LocationService:
    """FastAPI dependency: a LocationService bound to the request's DB session."""
    return LocationService(db)


def _bad_request() -> JSONResponse:
    return JSONResponse({"error": MISSING_FIELDS_ERROR}, status_code=status.HTTP_400_BAD_REQUEST)


def _failure_response(result: ServiceResult) -> JSONResponse:
    """Log the failure with its traceback and return a generic 500."""
    failure = result.failure
    if failure.kind is FailureKind.STORAGE:
        LOG.error("%s: storage failure", failure.operation, exc_info=failure.error)
    else:
        LOG.error("%s: unexpected failure", failure.operation, exc_info=failure.error)
    return JSONResponse({"error": GENERIC_ERROR}, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.get("", response_model=list[LocationResponse], responses=_ERROR_RESPONSES)
def list_locations(service: LocationService = Depends(get_location_service)):
    """List all locations."""
    result = service.get_locations()
    if not result.ok:
        return _failure_response(result)
    return result.value


@router.post(
    "",
    response_model=LocationResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_ERROR_RESPONSES,
)
async def create_location(request: Request, service: LocationService = Depends(get_location_service)):
    """
    Create a location from name, latitude, longitude and address.
    Any missing or invalid field (or a body that is not a JSON object) is a 400.
    """
    try:
        body = await request.json()
        draft = LocationCreate.model_validate(body)
    except (ValueError, ValidationError):
        return _bad_request()
    result = await run_in_threadpool(service.create_location, draft)
    if not result.ok:
        return _failure_response(result)
    return result.value


@router.delete("/", include_in_schema=False)
def delete_location_without_cuid() -> JSONResponse:
    """DELETE /api/location/ carries an empty id."""
    return _bad_request()


@router.delete("/{cuid}", status_code=status.HTTP_202_ACCEPTED, responses=_ERROR_RESPONSES)
def delete_location(cuid: str, service: LocationService = Depends(get_location_service)) -> JSONResponse:
    """Delete a location by cuid. Unknown cuids are accepted as well."""
    if not cuid:
        return _bad_request()
    result = service.delete_location(cuid)
    if not result.ok:
        return _failure_response(result)
    return JSONResponse({}, status_code=status.HTTP_202_ACCEPTED)
