from datetime import datetime, timedelta, timezone
from jose import jwt
from passlib.context import CryptContext

from petfoster.core.config import settings

ALGORITHM = "HS256"

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

def hash_password(password: str) -> str:
    return pwd_context.hash(password)

def verify_password(password: str, password_hash: str) -> bool:
    return pwd_context.verify(password, password_hash)

def create_access_token(payload: dict, expires_delta: timedelta | None = None, secret: str | None = None) -> str:
    now = datetime.now(timezone.utc)
    ttl = expires_delta if expires_delta is not None else timedelta(minutes=settings.JWT_TTL_MINUTES)
    data = payload.copy()
    data.update({"iat": int(now.timestamp()), "exp": int((now + ttl).timestamp())})
    return jwt.encode(data, secret or settings.JWT_SECRET, algorithm=ALGORITHM)

def decode_access_token(token: str, secret: str | None = None) -> dict:
    return jwt.decode(token, secret or settings.JWT_SECRET, algorithms=[ALGORITHM])
