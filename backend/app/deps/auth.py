# app/deps/auth.py
from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose.exceptions import ExpiredSignatureError, JWTError

from app.security import decode_token

# Tokens come from the external identity provider; tokenUrl is only for Swagger
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/token", auto_error=False)

def _user_id_from_token(token: str) -> str:
    """Return the opaque user identity (`sub`) or raise JWTError."""
    payload = decode_token(token)
    sub = payload.get("sub")
    if not sub:
        raise JWTError("Missing sub")
    return str(sub)

def get_current_user_id(token: Optional[str] = Depends(oauth2_scheme)) -> str:
    unauth = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not authenticated",
        headers={"WWW-Authenticate": "Bearer"},
    )
    if not token:
        raise unauth
    try:
        return _user_id_from_token(token)
    except ExpiredSignatureError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token expired",
            headers={"WWW-Authenticate": "Bearer"},
        )
    except JWTError:
        raise unauth

def get_optional_user_id(token: Optional[str] = Depends(oauth2_scheme)) -> Optional[str]:
    """
    Like get_current_user_id but never raises: actions report a missing
    identity themselves as an "Unauthorized" failure.
    """
    if not token:
        return None
    try:
        return _user_id_from_token(token)
    except JWTError:
        return None
