"""Page state for the locations UI: which modal is open and for what."""
from dataclasses import dataclass, field, replace
from typing import Any, Union

from schemas.locations import LocationResponse


@dataclass(frozen=True)
class AddLocationForm:
    """Values typed into the add modal."""

    name: str = ""
    latitude: float = 0.0
    longitude: float = 0.0
    address: str = ""

    @property
    def is_valid(self) -> bool:
        # A coordinate of exactly 0 counts as not filled in.
        return bool(self.name and self.latitude and self.longitude and self.address)

    def with_values(self, **values: Any) -> "AddLocationForm":
        return replace(self, **values)

    def to_draft(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "address": self.address,
        }


@dataclass(frozen=True)
class Closed:
    """No modal open."""


@dataclass(frozen=True)
class Viewing:
    location: LocationResponse


@dataclass(frozen=True)
class AddingNew:
    form: AddLocationForm = field(default_factory=AddLocationForm)


@dataclass(frozen=True)
class ConfirmingDelete:
    location: LocationResponse


PageState = Union[Closed, Viewing, AddingNew, ConfirmingDelete]
