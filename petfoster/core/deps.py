import logging

from fastapi import Depends, HTTPException
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import ExpiredSignatureError, JWTError

from petfoster.core.security import decode_access_token

bearer = HTTPBearer(auto_error=False)
_LOG = logging.getLogger("petfoster.auth")

def get_current_user(creds: HTTPAuthorizationCredentials = Depends(bearer)) -> dict:
    if not creds or creds.scheme.lower() != "bearer" or not creds.credentials:
        raise HTTPException(status_code=401, detail="Unauthorized")
    try:
        return decode_access_token(creds.credentials)
    except ExpiredSignatureError:
        _LOG.info("rejected expired token")
        raise HTTPException(status_code=401, detail="Token expired")
    except JWTError:
        _LOG.info("rejected invalid token")
        raise HTTPException(status_code=401, detail="Unauthorized")
