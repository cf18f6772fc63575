import math
from datetime import date, datetime
from typing import Iterable

from sqlalchemy import String, asc, desc, func, literal
from sqlalchemy.inspection import inspect as sa_inspect
from sqlalchemy.orm import Query

from petfoster.core.config import settings
from petfoster.core.errors import QueryError
from petfoster.schemas.query import FilterOperation, OrderDirection, QueryDescriptor

SEARCH_COLUMN = "search_vector"
SEARCH_CONFIG = "simple"

# Integer columns are at most BIGINT.
MIN_INT_VALUE = -(2**63)
MAX_INT_VALUE = 2**63 - 1


def _bad_filter_value(column_key: str, kind: str) -> QueryError:
    return QueryError("InvalidFilterValue", f'Invalid filter value for field "{column_key}" ({kind})')


def _coerce_number_filter_value(column_key: str, value, python_type):
    text = str(value).strip()
    if not text:
        raise _bad_filter_value(column_key, "number")
    try:
        number = python_type(text)
    except (ValueError, TypeError):
        raise _bad_filter_value(column_key, "number")
    if python_type is int and not MIN_INT_VALUE <= number <= MAX_INT_VALUE:
        raise _bad_filter_value(column_key, "number out of range")
    if python_type is float and not math.isfinite(number):
        raise _bad_filter_value(column_key, "number out of range")
    return number


def _coerce_date_filter_value(column_key: str, value):
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    text = str(value or "").strip()
    if not text:
        raise _bad_filter_value(column_key, "date")
    try:
        # Accept either YYYY-MM-DD or full ISO datetime and take its date part.
        if "T" in text or " " in text:
            return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
        return date.fromisoformat(text)
    except ValueError:
        raise _bad_filter_value(column_key, "date")


def _column_python_type(column):
    try:
        return column.property.columns[0].type.python_type
    except (AttributeError, IndexError, NotImplementedError):
        return None


def _coerce_filter_value(column, value):
    python_type = _column_python_type(column)
    if python_type in {int, float}:
        return _coerce_number_filter_value(column.key, value, python_type)
    if python_type is date:
        return _coerce_date_filter_value(column.key, value)
    return value


def _resolve_column(model, field: str):
    """Map a public field name onto a mapped column.

    Relationship names (``user``, ``pet``) resolve to their single local
    foreign-key column so ``?pet=3`` filters on ``pet_id``.
    """
    mapper = sa_inspect(model)
    if field in mapper.column_attrs:
        return getattr(model, field)
    if field in mapper.relationships:
        local_columns = list(mapper.relationships[field].local_columns)
        if len(local_columns) == 1:
            return getattr(model, mapper.get_property_by_column(local_columns[0]).key)
    return None


def _apply_filter(q: Query, col, operation: FilterOperation, raw_value) -> Query:
    if operation is FilterOperation.IS_NULL:
        return q.filter(col.is_(None) if raw_value else col.is_not(None))
    if operation is FilterOperation.IN:
        return q.filter(col.in_([_coerce_filter_value(col, v) for v in raw_value]))
    if operation is FilterOperation.NOT_IN:
        return q.filter(col.not_in([_coerce_filter_value(col, v) for v in raw_value]))

    value = _coerce_filter_value(col, raw_value)
    if operation is FilterOperation.GT:
        return q.filter(col > value)
    if operation is FilterOperation.GTE:
        return q.filter(col >= value)
    if operation is FilterOperation.LT:
        return q.filter(col < value)
    if operation is FilterOperation.LTE:
        return q.filter(col <= value)
    return q.filter(col == value)


def apply_query_descriptor(
    q: Query,
    model,
    descriptor: QueryDescriptor,
    order_fields: Iterable[str] | None = None,
) -> Query:
    """Apply search, filters, order and pagination to ``q``.

    When ``order_fields`` is given, ordering by any other field is skipped.
    """
    if descriptor.search:
        term = literal(descriptor.search, String()).concat(":*")
        vector = getattr(model, SEARCH_COLUMN)
        q = q.filter(vector.op("@@")(func.to_tsquery(SEARCH_CONFIG, term)))

    for f in descriptor.filters:
        col = _resolve_column(model, f.field)
        if col is None:
            continue
        q = _apply_filter(q, col, f.operation, f.value)

    if descriptor.order is not None and (order_fields is None or descriptor.order.field in order_fields):
        col = _resolve_column(model, descriptor.order.field)
        if col is not None:
            q = q.order_by(asc(col) if descriptor.order.direction is OrderDirection.ASC else desc(col))

    # A zero limit is treated like an absent one.
    q = q.limit(descriptor.limit or settings.DEFAULT_PAGE_LIMIT)
    if descriptor.offset:
        q = q.offset(descriptor.offset)
    return q
