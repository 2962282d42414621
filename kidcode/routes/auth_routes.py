from fastapi import APIRouter, Depends, status, Body
from sqlalchemy.orm import Session
import logging

from kidcode.core.database import get_db
from kidcode.core.dependencies import get_current_user
from kidcode.core.exceptions import Unauthorized
from kidcode.core.security import create_access_token, verify_password
from kidcode.crud.user_crud import create_user, get_user_by_email
from kidcode.models.user_model import User
from kidcode.schemas.user_schema import (
    UserRegisterRequest,
    UserLoginRequest,
    UserDisplay,
    TokenResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/register", response_model=TokenResponse, response_model_exclude_none=True, status_code=status.HTTP_201_CREATED)
def register_user(
    payload: UserRegisterRequest = Body(...),
    db: Session = Depends(get_db)
):
    """
    Register a new account and return a bearer token for it.
    Fails with 409 if the email is already registered.
    """
    logger.info(f"Registration attempt for email: {payload.email}")
    db_user = create_user(db, user_data=payload)
    token = create_access_token(db_user.id, db_user.email)
    return TokenResponse(token=token, display_name=db_user.display_name)


@router.post("/login", response_model=TokenResponse)
def login_user(
    payload: UserLoginRequest = Body(...),
    db: Session = Depends(get_db)
):
    """
    Exchange email and password for a bearer token.
    """
    logger.info(f"Login attempt for email: {payload.email}")

    user = get_user_by_email(db, email=payload.email)
    if not user or not verify_password(payload.password, user.password_hash):
        logger.warning(f"Login failed for email: {payload.email}")
        raise Unauthorized("Invalid credentials")

    logger.info(f"User {user.email} (ID: {user.id}) logged in successfully.")
    return TokenResponse(token=create_access_token(user.id, user.email), display_name=user.display_name)


@router.get("/me", response_model=UserDisplay)
def read_users_me(current_user: User = Depends(get_current_user)):
    """
    Get current authenticated user's details.
    """
    return current_user
