from __future__ import annotations

import logging
from typing import Any

from fastapi import HTTPException
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from petfoster.schemas.query import QueryDescriptor
from petfoster.services.filter_fields import FilterFieldRegistry, require_allowed_filters
from petfoster.services.query_apply import apply_query_descriptor

_LOG = logging.getLogger("petfoster.crud")

DELETE_SUCCESS = "Delete Success"


def load_row_or_404(db: Session, model, row_id: int) -> Any:
    row = db.get(model, row_id)
    if row is None:
        raise HTTPException(status_code=404, detail="Not Found")
    return row


def ensure_reference_or_400(db: Session, model, row_id: int | None, label: str) -> None:
    if row_id is None:
        return
    if db.get(model, row_id) is None:
        raise HTTPException(status_code=400, detail=f"{label} does not exist")


def query_rows(
    db: Session,
    model,
    *,
    entity: str,
    descriptor: QueryDescriptor,
    registry: FilterFieldRegistry,
) -> list[Any]:
    require_allowed_filters(descriptor, registry, entity)
    q = apply_query_descriptor(db.query(model), model, descriptor, order_fields=registry.allowed_fields(entity))
    return q.all()


def _commit_or_400(db: Session, action: str) -> None:
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        _LOG.info("%s rejected by database constraint: %s", action, exc.orig)
        raise HTTPException(status_code=400, detail=f"{action.capitalize()} Failed")


def create_row(db: Session, model, payload: BaseModel | dict) -> Any:
    data = payload.model_dump() if isinstance(payload, BaseModel) else dict(payload)
    row = model(**data)
    db.add(row)
    _commit_or_400(db, "create")
    db.refresh(row)
    return row


def update_row(db: Session, row: Any, payload: BaseModel) -> Any:
    for key, value in payload.model_dump(exclude_unset=True).items():
        setattr(row, key, value)
    db.add(row)
    _commit_or_400(db, "update")
    db.refresh(row)
    return row


def delete_row(db: Session, row: Any) -> str:
    db.delete(row)
    _commit_or_400(db, "delete")
    return DELETE_SUCCESS
