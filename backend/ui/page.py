"""Locations page controller: state transitions plus the API calls behind them."""
from typing import Any

from schemas.locations import LocationResponse
from ui.client import LocationsClient
from ui.state import AddingNew, AddLocationForm, Closed, ConfirmingDelete, PageState, Viewing


class InvalidTransition(Exception):
    """An action was requested that the current page state does not allow."""


class LocationsPage:
    """
    Holds the page state and the locations client.

    Starts with no modal open and no locations; call load() to fetch them.
    """

    def __init__(self, client: LocationsClient) -> None:
        self.client = client
        self.state: PageState = Closed()

    @property
    def locations(self) -> list[LocationResponse]:
        return self.client.locations

    def find(self, cuid: str) -> LocationResponse | None:
        """Return the loaded location with this cuid, or None."""
        for location in self.locations:
            if location.cuid == cuid:
                return location
        return None

    async def load(self) -> None:
        await self.client.refresh()

    def view(self, location: LocationResponse) -> None:
        self.state = Viewing(location)

    def request_delete(self, location: LocationResponse) -> None:
        self.state = ConfirmingDelete(location)

    def open_add(self) -> None:
        self.state = AddingNew()

    def update_form(self, **values: Any) -> AddLocationForm:
        """Change fields of the add form. Only allowed while the add modal is open."""
        if not isinstance(self.state, AddingNew):
            raise InvalidTransition("Add form is not open")
        self.state = AddingNew(self.state.form.with_values(**values))
        return self.state.form

    def close(self) -> None:
        """Close whatever modal is open. Closing the add modal discards the form."""
        self.state = Closed()

    async def confirm_delete(self) -> None:
        """Delete the focused location, reload the list and close the modal."""
        if not isinstance(self.state, ConfirmingDelete):
            raise InvalidTransition("No location is waiting for delete confirmation")
        await self.client.delete(self.state.location.cuid)
        await self.client.refresh()
        self.close()

    async def submit_add(self) -> LocationResponse:
        """Create a location from the add form, reload the list and close the modal."""
        if not isinstance(self.state, AddingNew):
            raise InvalidTransition("Add form is not open")
        form = self.state.form
        if not form.is_valid:
            raise InvalidTransition("Add form is incomplete")
        created = await self.client.create(form.to_draft())
        await self.client.refresh()
        self.close()
        return created
