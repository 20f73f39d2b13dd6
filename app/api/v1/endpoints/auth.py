"""Authentication endpoints."""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from app.api.deps import (
    get_current_active_user,
    get_db,
)
from app.core.exceptions import (
    AccountInactiveException,
    EmailAlreadyRegisteredException,
    InvalidCredentialsException,
)
from app.core.security import create_access_token
from app.crud import crud_user
from app.models.user import User
from app.schemas.user import (
    TokenResponse,
    UserCreate,
    UserResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/auth",
    tags=["Authentication"],
)


def _token_response(user: User) -> TokenResponse:
    access_token = create_access_token(data={"sub": user.email})
    return TokenResponse(
        access_token=access_token,
        token_type="bearer",
        user=UserResponse.model_validate(user),
    )


@router.post(
    "/register",
    response_model=TokenResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register new user",
    description="""
    Register a mother or doctor account.

    **Required fields:**
    - name, email, password (at least 8 characters), confirm_password

    **Optional fields:**
    - phone: digits, spaces, dashes, parentheses and a leading '+'
    - role: 'mother' (default) or 'doctor'
    """,
)
def register(
    user_in: UserCreate,
    db: Session = Depends(get_db),
) -> TokenResponse:
    """
    Register a new user and sign them in.

    Raises:
        HTTPException: 400 if email already registered
    """
    if crud_user.email_exists(db, user_in.email):
        logger.info(f"[AUTH] Registration rejected, email in use: {user_in.email}")
        raise EmailAlreadyRegisteredException()

    db_user = crud_user.create_user(db, user_in=user_in)
    logger.info(f"[AUTH] Registered user id={db_user.id}, role={db_user.role}")
    return _token_response(db_user)


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Login with email and password",
    description="OAuth2 password form; `username` carries the email address.",
)
def login(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db),
) -> TokenResponse:
    user = crud_user.authenticate(db, email=form_data.username, password=form_data.password)
    if not user:
        logger.warning(f"[AUTH] Failed login for {form_data.username}")
        raise InvalidCredentialsException()
    if not user.is_active:
        raise AccountInactiveException()

    logger.info(f"[AUTH] Login succeeded: id={user.id}, role={user.role}")
    return _token_response(user)


@router.get(
    "/me",
    response_model=UserResponse,
    summary="Get current user",
)
def read_me(current_user: User = Depends(get_current_active_user)) -> UserResponse:
    return UserResponse.model_validate(current_user)
