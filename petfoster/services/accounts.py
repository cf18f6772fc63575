from __future__ import annotations

import logging

from fastapi import HTTPException
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from petfoster.core.security import create_access_token, hash_password, verify_password
from petfoster.models.auth_user import AuthUser
from petfoster.models.client import Client
from petfoster.schemas.users import RegisterIn

_LOG = logging.getLogger("petfoster.auth")


def normalize_email(raw: str | None) -> str:
    return str(raw or "").strip().lower()


def get_user_by_email(db: Session, email: str) -> AuthUser | None:
    normalized = normalize_email(email)
    if not normalized:
        return None
    return db.query(AuthUser).filter(func.lower(AuthUser.email) == normalized).first()


def client_description_for(user: AuthUser) -> str:
    return f"{user.name} ({user.phone})"


def register_user(db: Session, payload: RegisterIn) -> AuthUser:
    """Create the auth user together with its client record."""
    email = normalize_email(payload.email)
    if not email or not payload.password:
        raise HTTPException(status_code=400, detail="Email and password are required")
    if get_user_by_email(db, email) is not None:
        raise HTTPException(status_code=400, detail="User Already Exists")

    user = AuthUser(
        email=email,
        password=hash_password(payload.password),
        name=payload.name,
        address=payload.address,
        phone=payload.phone,
    )
    db.add(user)
    try:
        db.flush()
        db.add(Client(user_id=user.id, description=client_description_for(user)))
        db.commit()
    except IntegrityError as exc:
        # Lost a race with a concurrent registration of the same email.
        db.rollback()
        _LOG.info("register rejected by database constraint: %s", exc.orig)
        raise HTTPException(status_code=400, detail="User Already Exists")
    db.refresh(user)
    _LOG.info("registered user id=%s with client record", user.id)
    return user


def login_user(db: Session, email: str, password: str) -> str:
    user = get_user_by_email(db, email)
    if user is None or not verify_password(password, user.password):
        raise HTTPException(status_code=401, detail="Unauthorized")
    return create_access_token({"sub": str(user.id), "email": user.email})
