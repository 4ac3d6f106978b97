"""HTML page routes for the locations UI.

The page talks to the location API over HTTP, either at API_BASE_URL or
in-process through the ASGI app itself.
"""
import logging
import math
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import APIRouter, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from ui.client import LocationsClient, LocationsClientError
from ui.page import InvalidTransition, LocationsPage
from ui.render import render_page
from utils.config import API_BASE_URL, MAPS_API_KEY

LOG = logging.getLogger(__name__)

API_TIMEOUT_S = 10.0
LOAD_ERROR = "Could not load your locations. Please try again later."
INCOMPLETE_FORM_ERROR = "Please fill in the name, address and coordinates."

router = APIRouter(tags=["pages"], include_in_schema=False)


@asynccontextmanager
async def _api_client(request: Request) -> AsyncIterator[httpx.AsyncClient]:
    if API_BASE_URL:
        client = httpx.AsyncClient(base_url=API_BASE_URL, timeout=API_TIMEOUT_S)
    else:
        client = httpx.AsyncClient(
            transport=httpx.ASGITransport(app=request.app),
            base_url="http://mylocations",
            timeout=API_TIMEOUT_S,
        )
    async with client:
        yield client


def _render(page: LocationsPage, error: Optional[str] = None, status_code: int = status.HTTP_200_OK) -> HTMLResponse:
    return HTMLResponse(render_page(page, maps_api_key=MAPS_API_KEY, error=error), status_code=status_code)


def _parse_coordinate(raw: str) -> float:
    """Form value to float; anything unparsable counts as not filled in (0)."""
    try:
        value = float(raw)
    except ValueError:
        return 0.0
    return value if math.isfinite(value) else 0.0


def _client_error_status(error: LocationsClientError) -> int:
    if error.status_code == status.HTTP_400_BAD_REQUEST:
        return status.HTTP_400_BAD_REQUEST
    return status.HTTP_502_BAD_GATEWAY


@router.get("/", response_class=HTMLResponse)
async def locations_page(request: Request, modal: Optional[str] = None, cuid: Optional[str] = None) -> HTMLResponse:
    """The locations table, with the add, view or delete modal open when asked for."""
    async with _api_client(request) as http:
        page = LocationsPage(LocationsClient(http))
        try:
            await page.load()
        except LocationsClientError:
            LOG.exception("Could not load locations for the page")
            return _render(page, error=LOAD_ERROR, status_code=status.HTTP_502_BAD_GATEWAY)

    if modal == "add":
        page.open_add()
    elif modal in ("view", "delete") and cuid:
        location = page.find(cuid)
        if location is not None and modal == "view":
            page.view(location)
        elif location is not None:
            page.request_delete(location)
    return _render(page)


@router.post("/ui/locations", response_class=HTMLResponse)
async def submit_add_location(
    request: Request,
    name: str = Form(""),
    address: str = Form(""),
    latitude: str = Form(""),
    longitude: str = Form(""),
):
    """Submit the add modal. Redirects back to the page on success, re-renders the modal otherwise."""
    async with _api_client(request) as http:
        page = LocationsPage(LocationsClient(http))
        page.open_add()
        page.update_form(
            name=name,
            address=address,
            latitude=_parse_coordinate(latitude),
            longitude=_parse_coordinate(longitude),
        )
        try:
            await page.submit_add()
        except InvalidTransition:
            error, status_code = INCOMPLETE_FORM_ERROR, status.HTTP_400_BAD_REQUEST
        except LocationsClientError as e:
            LOG.exception("Creating a location from the page failed")
            error, status_code = str(e), _client_error_status(e)
        else:
            return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)

        try:
            await page.load()
        except LocationsClientError:
            LOG.exception("Could not reload locations after a failed add")
    return _render(page, error=error, status_code=status_code)


@router.post("/ui/locations/{cuid}/delete", response_class=HTMLResponse)
async def confirm_delete_location(request: Request, cuid: str):
    """Confirm the delete modal for a location, then go back to the page."""
    async with _api_client(request) as http:
        page = LocationsPage(LocationsClient(http))
        try:
            await page.load()
            location = page.find(cuid)
            if location is not None:
                page.request_delete(location)
                await page.confirm_delete()
        except LocationsClientError as e:
            LOG.exception("Deleting location %s from the page failed", cuid)
            return _render(page, error=str(e), status_code=_client_error_status(e))
    return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)
