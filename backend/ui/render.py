"""Render the locations page as HTML."""
from html import escape
from typing import Optional
from urllib.parse import quote, urlencode

from schemas.locations import LocationResponse
from ui.page import LocationsPage
from ui.state import AddingNew, AddLocationForm, ConfirmingDelete, Viewing

TITLE = "MyLocations"
DESCRIPTION = "MyLocations is a simple app to save your favorite locations."
MAP_EMBED_URL = "https://www.google.com/maps/embed/v1/place"
MAP_ZOOM = 15

_STYLE = """
body { font-family: sans-serif; margin: 2rem auto; max-width: 60rem; }
table { border-collapse: collapse; width: 100%; }
th, td { border-bottom: 1px solid #ddd; padding: .5rem; text-align: left; }
.error { background: #f8d7da; color: #842029; padding: .75rem; }
.modal-overlay { position: fixed; inset: 0; background: rgba(0, 0, 0, .5); }
.modal { position: fixed; top: 10%; left: 50%; transform: translateX(-50%); background: #fff;
         border: 0; min-width: 24rem; padding: 0; }
.modal-header, .modal-footer { display: flex; justify-content: space-between; padding: .75rem; }
.modal-body { padding: .75rem; }
.map { border: 0; height: 300px; width: 100%; }
"""


def _modal(title: str, body: str, footer: str) -> str:
    """Overlay plus dialog. The overlay and the header close link both go back to the bare page."""
    return (
        '<a class="modal-overlay" data-testid="modal-overlay" href="/" aria-label="Close"></a>'
        '<dialog class="modal" open>'
        f'<div class="modal-header"><h3>{escape(title)}</h3>'
        '<a class="btn-close" href="/" aria-label="Close">&times;</a></div>'
        f'<div class="modal-body">{body}</div>'
        f'<div class="modal-footer">{footer}</div>'
        "</dialog>"
    )


def _page_link(modal: str, location: LocationResponse) -> str:
    return "/?" + urlencode({"modal": modal, "cuid": location.cuid})


def render_table(locations: list[LocationResponse]) -> str:
    rows = "".join(
        "<tr>"
        f"<td>{escape(loc.name)}</td>"
        '<td class="actions">'
        f'<a class="btn" href="{escape(_page_link("view", loc))}">View</a> '
        f'<a class="btn btn-danger" href="{escape(_page_link("delete", loc))}">Delete</a>'
        "</td></tr>"
        for loc in locations
    )
    return (
        '<table class="table">'
        "<thead><tr><th>Location</th><th>Actions</th></tr></thead>"
        f"<tbody>{rows}</tbody></table>"
    )


def render_view_modal(location: LocationResponse, maps_api_key: str = "") -> str:
    body = (
        f"<p><strong>Name:</strong> {escape(location.name)}</p>"
        f"<p><strong>Address:</strong> {escape(location.address)}</p>"
    )
    if maps_api_key:
        query = urlencode(
            {"key": maps_api_key, "q": f"{location.latitude},{location.longitude}", "zoom": MAP_ZOOM}
        )
        body += (
            f'<section><iframe class="map" title="{escape(location.name)}" '
            f'src="{escape(MAP_EMBED_URL + "?" + query)}" loading="lazy"></iframe></section>'
        )
    footer = '<span></span><a class="btn btn-primary" href="/">Close</a>'
    return _modal("View location", body, footer)


def _coordinate_value(value: float) -> str:
    return "" if not value else repr(value)


def render_add_modal(form: AddLocationForm) -> str:
    disabled = "" if form.is_valid else " disabled"
    body = (
        '<form id="add-location" method="post" action="/ui/locations">'
        '<label for="location-name">Location name</label>'
        f'<input id="location-name" name="name" value="{escape(form.name)}" '
        "placeholder=\"Eg: Parent's house\" required>"
        '<label for="location-address">Location address</label>'
        f'<input id="location-address" name="address" value="{escape(form.address)}" required>'
        '<label for="location-latitude">Latitude</label>'
        f'<input id="location-latitude" name="latitude" type="number" step="any" min="-90" max="90" '
        f'value="{_coordinate_value(form.latitude)}" required>'
        '<label for="location-longitude">Longitude</label>'
        f'<input id="location-longitude" name="longitude" type="number" step="any" min="-180" max="180" '
        f'value="{_coordinate_value(form.longitude)}" required>'
        "</form>"
    )
    footer = (
        '<a class="btn" href="/">Cancel</a>'
        f'<button class="btn btn-primary" type="submit" form="add-location"{disabled}>Add</button>'
    )
    return _modal("Add a new location", body, footer)


def render_delete_modal(location: LocationResponse) -> str:
    body = (
        f"<p>Are you sure you want to delete {escape(location.name)} "
        f"with address {escape(location.address)}?</p>"
    )
    action = f"/ui/locations/{quote(location.cuid, safe='')}/delete"
    footer = (
        '<a class="btn" href="/">Cancel</a>'
        f'<form method="post" action="{escape(action)}">'
        '<button class="btn btn-primary" type="submit">Delete</button></form>'
    )
    return _modal("Delete location", body, footer)


def render_page(page: LocationsPage, maps_api_key: str = "", error: Optional[str] = None) -> str:
    """Full HTML document for the page in its current state."""
    state = page.state
    if isinstance(state, Viewing):
        modal = render_view_modal(state.location, maps_api_key)
    elif isinstance(state, AddingNew):
        modal = render_add_modal(state.form)
    elif isinstance(state, ConfirmingDelete):
        modal = render_delete_modal(state.location)
    else:
        modal = ""
    banner = f'<div class="error" role="alert">{escape(error)}</div>' if error else ""
    return (
        "<!DOCTYPE html>"
        '<html lang="en"><head><meta charset="utf-8">'
        f"<title>{TITLE}</title>"
        f'<meta name="description" content="{escape(DESCRIPTION)}">'
        f"<style>{_STYLE}</style></head><body>"
        "<main>"
        f"<h1>{TITLE}</h1>"
        "<p>Here you can find all your favorite locations, add new ones or delete them.</p>"
        f"{banner}"
        '<a class="btn btn-primary" href="/?modal=add">Add new location</a>'
        f"{render_table(page.locations)}"
        "</main>"
        f"{modal}"
        "</body></html>"
    )
