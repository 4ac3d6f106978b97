# UI: page state, API client, page controller, HTML rendering
from ui.client import LocationsClient, LocationsClientError
from ui.page import InvalidTransition, LocationsPage
from ui.render import render_page
from ui.state import AddingNew, AddLocationForm, Closed, ConfirmingDelete, PageState, Viewing

__all__ = [
    "AddingNew",
    "AddLocationForm",
    "Closed",
    "ConfirmingDelete",
    "InvalidTransition",
    "LocationsClient",
    "LocationsClientError",
    "LocationsPage",
    "PageState",
    "Viewing",
    "render_page",
]
