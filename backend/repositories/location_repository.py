"""Location repository: insert, find with projection, delete by cuid."""
from collections.abc import Iterable
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from models.location import Location


def insert_location(session: Session, document: dict[str, Any]) -> Location:
    """Insert one location document, commit, and return the stored row."""
    loc = Location(**document)
    session.add(loc)
    session.commit()
    session.refresh(loc)
    return loc


def find_locations(session: Session, exclude: Iterable[str] = ()) -> list[dict[str, Any]]:
    """
    Return all locations as plain dicts, in insertion order.
    Columns named in exclude are left out of the SELECT itself.
    """
    excluded = set(exclude)
    columns = [col for col in Location.__table__.columns if col.key not in excluded]
    result = session.execute(select(*columns).order_by(Location.id))
    return [dict(row) for row in result.mappings().all()]


def delete_location(session: Session, cuid: str) -> bool:
    """Delete a location by cuid. Returns True if a row was deleted, False if none matched."""
    result = session.execute(delete(Location).where(Location.cuid == cuid))
    session.commit()
    return result.rowcount > 0
