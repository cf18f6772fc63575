from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from petfoster.db.session import get_db
from petfoster.schemas.users import LoginIn, RegisterIn, TokenOut, UserOut
from petfoster.services.accounts import login_user, register_user

router = APIRouter()


@router.post("/register", response_model=UserOut)
def register(payload: RegisterIn, db: Session = Depends(get_db)):
    return register_user(db, payload)


@router.post("/login", response_model=TokenOut)
def login(payload: LoginIn, db: Session = Depends(get_db)):
    return TokenOut(access_token=login_user(db, payload.email, payload.password))
