from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from petfoster.api.common import get_query_descriptor
from petfoster.db.session import get_db
from petfoster.models.auth_user import AuthUser
from petfoster.models.client import Client
from petfoster.schemas.clients import ClientCreate, ClientOut, ClientUpdate
from petfoster.schemas.query import QueryDescriptor
from petfoster.services.crud import (
    create_row,
    delete_row,
    ensure_reference_or_400,
    load_row_or_404,
    query_rows,
    update_row,
)
from petfoster.services.filter_fields import ENTITY_CLIENTS, FilterFieldRegistry, get_filter_registry

router = APIRouter()


@router.post("", response_model=ClientOut)
def create_client(payload: ClientCreate, db: Session = Depends(get_db)):
    ensure_reference_or_400(db, AuthUser, payload.user_id, "User")
    return create_row(db, Client, payload)


@router.get("", response_model=list[ClientOut])
def list_clients(
    descriptor: QueryDescriptor = Depends(get_query_descriptor),
    registry: FilterFieldRegistry = Depends(get_filter_registry),
    db: Session = Depends(get_db),
):
    return query_rows(db, Client, entity=ENTITY_CLIENTS, descriptor=descriptor, registry=registry)


@router.get("/{client_id}", response_model=ClientOut)
def get_client(client_id: int, db: Session = Depends(get_db)):
    return load_row_or_404(db, Client, client_id)


@router.patch("/{client_id}", response_model=ClientOut)
def update_client(client_id: int, payload: ClientUpdate, db: Session = Depends(get_db)):
    row = load_row_or_404(db, Client, client_id)
    ensure_reference_or_400(db, AuthUser, payload.user_id, "User")
    return update_row(db, row, payload)


@router.delete("/{client_id}")
def delete_client(client_id: int, db: Session = Depends(get_db)):
    row = load_row_or_404(db, Client, client_id)
    return {"detail": delete_row(db, row)}
