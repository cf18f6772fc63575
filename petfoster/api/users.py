from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from petfoster.api.common import get_query_descriptor
from petfoster.db.session import get_db
from petfoster.models.auth_user import AuthUser
from petfoster.schemas.query import QueryDescriptor
from petfoster.schemas.users import UserOut, UserUpdate
from petfoster.services.accounts import normalize_email
from petfoster.services.crud import delete_row, load_row_or_404, query_rows, update_row
from petfoster.services.filter_fields import ENTITY_USERS, FilterFieldRegistry, get_filter_registry

router = APIRouter()


@router.get("", response_model=list[UserOut])
def list_users(
    descriptor: QueryDescriptor = Depends(get_query_descriptor),
    registry: FilterFieldRegistry = Depends(get_filter_registry),
    db: Session = Depends(get_db),
):
    return query_rows(db, AuthUser, entity=ENTITY_USERS, descriptor=descriptor, registry=registry)


@router.get("/{user_id}", response_model=UserOut)
def get_user(user_id: int, db: Session = Depends(get_db)):
    return load_row_or_404(db, AuthUser, user_id)


@router.patch("/{user_id}", response_model=UserOut)
def update_user(user_id: int, payload: UserUpdate, db: Session = Depends(get_db)):
    row = load_row_or_404(db, AuthUser, user_id)
    if payload.email is not None:
        payload.email = normalize_email(payload.email)
    return update_row(db, row, payload)


@router.delete("/{user_id}")
def delete_user(user_id: int, db: Session = Depends(get_db)):
    row = load_row_or_404(db, AuthUser, user_id)
    return {"detail": delete_row(db, row)}
