from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from petfoster.api.common import get_query_descriptor
from petfoster.db.session import get_db
from petfoster.models.auth_user import AuthUser
from petfoster.models.foster import Foster
from petfoster.models.pet import Pet
from petfoster.schemas.foster import FosterCreate, FosterOut, FosterUpdate
from petfoster.schemas.query import QueryDescriptor
from petfoster.services.crud import (
    create_row,
    delete_row,
    ensure_reference_or_400,
    load_row_or_404,
    query_rows,
    update_row,
)
from petfoster.services.filter_fields import ENTITY_FOSTER, FilterFieldRegistry, get_filter_registry

router = APIRouter()


def _ensure_foster_refs(db: Session, payload: FosterCreate | FosterUpdate) -> None:
    ensure_reference_or_400(db, Pet, payload.pet_id, "Pet")
    ensure_reference_or_400(db, AuthUser, payload.user_id, "User")


@router.post("", response_model=FosterOut)
def create_foster(payload: FosterCreate, db: Session = Depends(get_db)):
    _ensure_foster_refs(db, payload)
    return create_row(db, Foster, payload)


@router.get("", response_model=list[FosterOut])
def list_foster(
    descriptor: QueryDescriptor = Depends(get_query_descriptor),
    registry: FilterFieldRegistry = Depends(get_filter_registry),
    db: Session = Depends(get_db),
):
    return query_rows(db, Foster, entity=ENTITY_FOSTER, descriptor=descriptor, registry=registry)


@router.get("/{foster_id}", response_model=FosterOut)
def get_foster(foster_id: int, db: Session = Depends(get_db)):
    return load_row_or_404(db, Foster, foster_id)


@router.patch("/{foster_id}", response_model=FosterOut)
def update_foster(foster_id: int, payload: FosterUpdate, db: Session = Depends(get_db)):
    row = load_row_or_404(db, Foster, foster_id)
    _ensure_foster_refs(db, payload)
    return update_row(db, row, payload)


@router.delete("/{foster_id}")
def delete_foster(foster_id: int, db: Session = Depends(get_db)):
    row = load_row_or_404(db, Foster, foster_id)
    return {"detail": delete_row(db, row)}
