"""Pydantic schemas for location API."""
from pydantic import BaseModel, ConfigDict, Field


class LocationCreate(BaseModel):
    """
    Draft location: payload for creating a location.
    Strict so that strings are not coerced into coordinates and numbers are not coerced into names.
    """

    model_config = ConfigDict(strict=True)

    name: str = Field(min_length=1)
    latitude: float = Field(ge=-90, le=90, allow_inf_nan=False)
    longitude: float = Field(ge=-180, le=180, allow_inf_nan=False)
    address: str = Field(min_length=1)


class LocationResponse(BaseModel):
    """Location in API responses. Only public fields."""

    cuid: str
    name: str
    latitude: float
    longitude: float
    address: str


class ErrorResponse(BaseModel):
    """Body returned for 400 and 500 responses."""

    error: str
