"""FastAPI dependency injection functions for authentication and database access."""

import logging
from typing import Callable, Generator

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from app.core.exceptions import (
    ChildNotFoundException,
    UnauthorizedAccessException,
)
from app.core.security import decode_token
from app.crud import crud_child, crud_user
from app.database import SessionLocal
from app.models.child import Child
from app.models.user import User

logger = logging.getLogger(__name__)

# OAuth2 Bearer token scheme
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/login")


def get_db() -> Generator[Session, None, None]:
    """
    Dependency to get database session.

    Yields:
        Session: SQLAlchemy database session
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db)
) -> User:
    """
    Dependency to get current authenticated user from JWT token.

    Args:
        token: JWT token from Authorization header
        db: Database session

    Returns:
        User: Authenticated user model

    Raises:
        HTTPException: 401 if token is invalid or user not found
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    try:
        payload = decode_token(token)
        email: str = payload.get("sub")
        if email is None:
            logger.warning("[AUTH] Email is None in token payload")
            raise credentials_exception
    except HTTPException:
        logger.warning("[AUTH] Token decode failed")
        raise credentials_exception

    user = crud_user.get_by_email(db, email)
    if user is None:
        logger.warning(f"[AUTH] User not found for email: {email}")
        raise credentials_exception

    logger.debug(f"[AUTH] User authenticated: id={user.id}, role={user.role}")
    return user


def get_current_active_user(
    current_user: User = Depends(get_current_user)
) -> User:
    """
    Dependency to verify current user is active.

    Raises:
        HTTPException: 403 if user is inactive
    """
    if not current_user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Inactive user"
        )
    return current_user


def require_role(*allowed_roles: str) -> Callable:
    """
    Factory function to create role-based access control dependency.

    Args:
        *allowed_roles: User roles allowed to access the endpoint

    Returns:
        Callable: Dependency function that checks user role

    Raises:
        HTTPException: 403 if user role not in allowed_roles

    Example:
        @router.get("/reports/vaccination")
        async def vaccination_report(current_user: User = Depends(require_role("doctor"))):
            ...
    """
    async def role_checker(
        current_user: User = Depends(get_current_active_user)
    ) -> User:
        if current_user.role not in allowed_roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Not enough permissions. Required role(s): {', '.join(allowed_roles)}"
            )
        return current_user

    return role_checker


def get_accessible_child(db: Session, child_id: int, current_user: User) -> Child:
    """
    Load a child the current user may see.

    Doctors see every child; a mother only her own. The ownership check runs
    before anything about the child is returned.

    Raises:
        ChildNotFoundException: 404 if the child does not exist
        UnauthorizedAccessException: 403 if a mother asks for another mother's child
    """
    child = crud_child.get(db, child_id)
    if child is None:
        raise ChildNotFoundException()
    if current_user.role == "mother" and child.mother_id != current_user.id:
        logger.warning(f"[AUTH] Mother {current_user.id} denied access to child {child_id}")
        raise UnauthorizedAccessException()
    return child


def mother_scope(current_user: User):
    """Mother id to filter by, or None for doctors (who see everything)."""
    return current_user.id if current_user.role == "mother" else None


__all__ = [
    "oauth2_scheme",
    "get_db",
    "get_current_user",
    "get_current_active_user",
    "require_role",
    "get_accessible_child",
    "mother_scope",
]
