# Schemas package
from .health import HealthResponse
from .locations import ErrorResponse, LocationCreate, LocationResponse

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "LocationCreate",
    "LocationResponse",
]
