"""SQLAlchemy declarative base; importing the package registers every table."""
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for the location tables."""


from models.location import Location  # noqa: E402,F401 - register with Base
