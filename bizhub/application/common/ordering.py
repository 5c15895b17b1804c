"""Parse "Field asc, Other desc" ordering strings into SQL order clauses."""

import re
from collections.abc import Iterable
from typing import Any

from sqlalchemy import inspect
from sqlalchemy.sql.elements import UnaryExpression

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def to_snake_case(name: str) -> str:
    """CreatedOn -> created_on, display_name -> display_name."""
    return _CAMEL_BOUNDARY.sub("_", name.strip()).lower()


def parse_order_by(order_by: str | None) -> list[tuple[str, bool]]:
    """
    Parse an ordering string.

    Args:
        order_by: Comma separated "Field [asc|desc]" terms

    Returns:
        List of (snake_case field name, descending) pairs
    """
    if not order_by:
        return []

    terms: list[tuple[str, bool]] = []
    for raw_term in order_by.split(","):
        parts = raw_term.split()
        if not parts:
            continue
        descending = len(parts) > 1 and parts[1].lower() == "desc"
        terms.append((to_snake_case(parts[0]), descending))
    return terms


def order_clauses(
    model: type[Any],
    order_by: str | None,
    allowed: Iterable[str] | None = None,
) -> list[UnaryExpression[Any]]:
    """
    Build order clauses for a mapped model.

    Unknown or disallowed fields are ignored. The primary key is always
    appended as a tie-break so paging is stable.
    """
    mapper = inspect(model)
    columns = {attribute.key: attribute for attribute in mapper.column_attrs}
    permitted = set(allowed) if allowed is not None else set(columns)

    clauses: list[UnaryExpression[Any]] = []
    for field_name, descending in parse_order_by(order_by):
        if field_name not in columns or field_name not in permitted:
            continue
        column = getattr(model, field_name)
        clauses.append(column.desc() if descending else column.asc())

    for key_column in mapper.primary_key:
        clauses.append(getattr(model, mapper.get_property_by_column(key_column).key).asc())
    return clauses
