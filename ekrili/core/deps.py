from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError
from typing import Optional
import logging

from ekrili.core.security import decode_access_token
from ekrili.models.user import User
from ekrili.services.storage import MemoryStorage

logger = logging.getLogger(__name__)

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login")
optional_oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)


def get_storage(request: Request) -> MemoryStorage:
    """The storage instance created with the application"""
    return request.app.state.storage


def _user_from_token(token: str, storage: MemoryStorage) -> Optional[User]:
    try:
        payload = decode_access_token(token)
    except JWTError as e:
        logger.warning(f"JWT decode error: {e}")
        return None

    # User id is stored in the "sub" field
    subject = payload.get("sub")
    if subject is None or not str(subject).isdigit():
        logger.warning("Token missing or malformed 'sub' field")
        return None

    return storage.get_user(int(subject))


def get_current_user(
    token: str = Depends(oauth2_scheme),
    storage: MemoryStorage = Depends(get_storage),
) -> User:
    """
    Get current authenticated user from JWT token.
    Returns 401 if token is invalid or user not found.
    """
    user = _user_from_token(token, storage)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


def get_current_user_optional(
    token: Optional[str] = Depends(optional_oauth2_scheme),
    storage: MemoryStorage = Depends(get_storage),
) -> Optional[User]:
    """Current user if a valid token was sent, otherwise None"""
    if not token:
        return None
    return _user_from_token(token, storage)


def require_owner(user: User = Depends(get_current_user)) -> User:
    """Verify user may publish listings (role owner or both)"""
    if not user.is_owner:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Owner access required"
        )
    return user
