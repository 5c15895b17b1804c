"""Helpers for mapping ORM objects without triggering lazy loads."""

from typing import Any

from sqlalchemy import inspect


def is_loaded(entity: object, attribute: str) -> bool:
    """True when the attribute is present on the instance without a query."""
    return attribute not in inspect(entity).unloaded


def loaded_or_none(entity: object, attribute: str) -> Any:
    """
    Read a relationship only if a specification already loaded it.

    Async sessions cannot lazy load, so related data that was not eagerly
    included is reported as None instead.
    """
    if not is_loaded(entity, attribute):
        return None
    return getattr(entity, attribute)
