from __future__ import annotations

import logging
from typing import Iterable

from fastapi import Request

from petfoster.core.errors import QueryError
from petfoster.schemas.query import QueryDescriptor

_LOG = logging.getLogger("petfoster.query")

ENTITY_USERS = "users"
ENTITY_PETS = "pets"
ENTITY_CLIENTS = "clients"
ENTITY_FOSTER = "foster"

# Public DTO attribute names per entity. Password hash, search_vector and raw
# foreign keys are not filterable.
ENTITY_FILTER_FIELDS: dict[str, tuple[str, ...]] = {
    ENTITY_USERS: ("id", "email", "name", "address", "phone"),
    ENTITY_PETS: ("id", "name", "species", "gender", "age", "description"),
    ENTITY_CLIENTS: ("id", "user", "description"),
    ENTITY_FOSTER: ("id", "user", "description", "pet", "start_date", "end_date"),
}


class FilterFieldRegistry:
    """Write-once map of entity name -> fields a client may filter on."""

    def __init__(self) -> None:
        self._fields: dict[str, frozenset[str]] = {}

    def populate(self, entity: str, fields: Iterable[str]) -> None:
        if entity in self._fields:
            return
        self._fields[entity] = frozenset(fields)
        _LOG.info("filter fields for %s: %s", entity, sorted(self._fields[entity]))

    def is_populated(self, entity: str) -> bool:
        return entity in self._fields

    def allowed_fields(self, entity: str) -> frozenset[str]:
        return self._fields.get(entity, frozenset())

    def entities(self) -> list[str]:
        return sorted(self._fields)


def build_filter_registry(
    declared: dict[str, tuple[str, ...]] | None = None,
) -> FilterFieldRegistry:
    registry = FilterFieldRegistry()
    for entity, fields in (declared or ENTITY_FILTER_FIELDS).items():
        registry.populate(entity, fields)
    return registry


def validate_filters(descriptor: QueryDescriptor, allowed_fields: Iterable[str]) -> bool:
    allowed = allowed_fields if isinstance(allowed_fields, (set, frozenset)) else set(allowed_fields)
    return all(clause.field in allowed for clause in descriptor.filters)


def require_allowed_filters(descriptor: QueryDescriptor, registry: FilterFieldRegistry, entity: str) -> None:
    if not validate_filters(descriptor, registry.allowed_fields(entity)):
        rejected = [c.field for c in descriptor.filters if c.field not in registry.allowed_fields(entity)]
        _LOG.info("rejected filter fields for %s: %s", entity, rejected)
        raise QueryError("InvalidFilterField", "Filter Field does not belong to Entity")


def get_filter_registry(request: Request) -> FilterFieldRegistry:
    return request.app.state.filter_fields
