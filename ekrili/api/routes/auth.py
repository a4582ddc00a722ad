"""
Authentication Endpoints
User signup, login, and current-user lookup
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status

from ekrili.core.deps import get_current_user, get_storage
from ekrili.core.security import create_access_token, get_password_hash, verify_password
from ekrili.models.user import User
from ekrili.schemas.user import Token, UserCreate, UserLogin, UserResponse
from ekrili.services.storage import MemoryStorage

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/signup", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def signup(user_in: UserCreate, storage: MemoryStorage = Depends(get_storage)):
    """Register a new user"""
    if storage.get_user_by_email(user_in.email):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User already exists"
        )

    user = storage.create_user(
        user_in.model_copy(update={"password": get_password_hash(user_in.password)})
    )
    logger.info(f"New {user.role.value} account {user.id}")
    return user


@router.post("/login", response_model=Token)
def login(user_credentials: UserLogin, storage: MemoryStorage = Depends(get_storage)):
    """Login and get access token with user info"""
    user = storage.get_user_by_email(user_credentials.email)

    if not user or not verify_password(user_credentials.password, user.password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token = create_access_token(data={"sub": str(user.id)})
    return Token(access_token=access_token, user=UserResponse.model_validate(user))


@router.post("/logout")
def logout(current_user: User = Depends(get_current_user)):
    """Tokens are stateless; the client discards its token"""
    logger.info(f"User {current_user.id} logged out")
    return {"success": True}


@router.get("/me", response_model=UserResponse)
def get_current_user_info(current_user: User = Depends(get_current_user)):
    """Get current user information"""
    return current_user
