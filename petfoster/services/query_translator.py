"""Translate list-endpoint query strings into a ``QueryDescriptor``.

Supported keys::

    search=term
    order=field            (ascending)
    order=field__desc      (asc | desc | dsc, case-insensitive)
    limit=10&offset=20
    field=value            (equality)
    field__op=value        (op: eq, is_null, in, not_in, gt, gte, lt, lte)

``in``/``not_in`` take comma separated values and ``is_null`` takes
``true``/``false``. Values stay strings; the data layer coerces them to the
column type.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from petfoster.core.errors import QueryError
from petfoster.schemas.query import (
    FilterClause,
    FilterOperation,
    OrderClause,
    OrderDirection,
    QueryDescriptor,
)

KEY_SEPARATOR = "__"
LIST_SEPARATOR = ","
# Largest LIMIT/OFFSET a signed 64-bit bound parameter can carry.
MAX_PAGINATION_VALUE = 2**63 - 1

SEARCH_KEY = "search"
LIMIT_KEY = "limit"
OFFSET_KEY = "offset"
ORDER_KEY = "order"

_LOG = logging.getLogger("petfoster.query")

_FILTER_OPERATIONS: dict[str, FilterOperation] = {
    "eq": FilterOperation.EQ,
    "is_null": FilterOperation.IS_NULL,
    "in": FilterOperation.IN,
    "not_in": FilterOperation.NOT_IN,
    "gt": FilterOperation.GT,
    "gte": FilterOperation.GTE,
    "lt": FilterOperation.LT,
    "lte": FilterOperation.LTE,
}

_ORDER_DIRECTIONS: dict[str, OrderDirection] = {
    "asc": OrderDirection.ASC,
    "desc": OrderDirection.DESC,
    "dsc": OrderDirection.DESC,
}

_LIST_OPERATIONS = {FilterOperation.IN, FilterOperation.NOT_IN}


def filter_operation_from_token(token: str) -> FilterOperation:
    # Unknown tokens fall back to equality instead of being rejected.
    return _FILTER_OPERATIONS.get(token.lower(), FilterOperation.EQ)


def order_direction_from_token(token: str) -> OrderDirection:
    return _ORDER_DIRECTIONS.get(token.lower(), OrderDirection.ASC)


def _split_once(text: str, error_code: str) -> tuple[str, str | None]:
    parts = text.split(KEY_SEPARATOR)
    if len(parts) > 2:
        raise QueryError(error_code, "Too many arguments")
    if len(parts) == 1:
        return parts[0], None
    return parts[0], parts[1]


def _parse_pagination(key: str, value: str) -> int:
    text = value.strip()
    if not (text.isascii() and text.isdigit()):
        raise QueryError("InvalidPaginationValue", f"Expected non-negative integer for {key}")
    digits = text.lstrip("0")
    if len(digits) > len(str(MAX_PAGINATION_VALUE)) or int(digits or "0") > MAX_PAGINATION_VALUE:
        raise QueryError("InvalidPaginationValue", f"Value too large for {key}")
    return int(digits or "0")


def _parse_order(value: str) -> OrderClause:
    field, direction = _split_once(value, "InvalidOrderQuery")
    if not direction:
        return OrderClause(field=field, direction=OrderDirection.ASC)
    return OrderClause(field=field, direction=order_direction_from_token(direction))


def _parse_filter(key: str, value: str) -> FilterClause:
    field, token = _split_once(key, "InvalidFilterQuery")
    if not token:
        return FilterClause(field=field, operation=FilterOperation.EQ, value=value)

    operation = filter_operation_from_token(token)
    if operation is FilterOperation.IS_NULL:
        flag = value.lower()
        if flag not in {"true", "false"}:
            raise QueryError("InvalidFilterValue", f"Expected Filter Value true/false for {key}")
        return FilterClause(field=field, operation=operation, value=flag == "true")
    if operation in _LIST_OPERATIONS:
        return FilterClause(field=field, operation=operation, value=value.split(LIST_SEPARATOR))
    return FilterClause(field=field, operation=operation, value=value)


def parse_query_params(raw: Mapping[str, Any]) -> QueryDescriptor:
    """Build a descriptor from raw query parameters.

    Keys are processed in the mapping's iteration order, so filters keep the
    order they were given in. Raises ``QueryError`` on the first malformed key.
    """
    descriptor = QueryDescriptor()

    for key in raw:
        value = str(raw[key])

        if key == SEARCH_KEY:
            descriptor.search = value
        elif key == LIMIT_KEY:
            descriptor.limit = _parse_pagination(key, value)
        elif key == OFFSET_KEY:
            descriptor.offset = _parse_pagination(key, value)
        elif key == ORDER_KEY:
            descriptor.order = _parse_order(value)
        else:
            descriptor.filters.append(_parse_filter(key, value))

    _LOG.debug("query descriptor: %s", descriptor.model_dump(mode="json"))
    return descriptor
