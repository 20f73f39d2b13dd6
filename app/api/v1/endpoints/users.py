"""User endpoints."""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.orm import Session

from app.api.deps import (
    get_current_active_user,
    get_db,
    require_role,
)
from app.core.exceptions import EmailAlreadyRegisteredException, MotherNotFoundException
from app.core.security import verify_password
from app.crud import crud_child, crud_mother_health_record, crud_user
from app.models.user import User
from app.schemas.child import ChildResponse
from app.schemas.mother_health_record import MotherHealthRecordResponse, MotherHealthTrendPoint
from app.schemas.profile import MotherProfileResponse
from app.schemas.user import MotherListItem, PasswordChange, UserResponse, UserUpdate

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/users",
    tags=["Users"],
)


@router.get(
    "/me",
    response_model=UserResponse,
    status_code=status.HTTP_200_OK,
    summary="Get current user info",
)
def get_current_user_info(
    current_user: User = Depends(get_current_active_user),
) -> User:
    return current_user


@router.put(
    "/me",
    response_model=UserResponse,
    status_code=status.HTTP_200_OK,
    summary="Update current user profile",
)
def update_current_user(
    user_in: UserUpdate,
    current_user: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
) -> User:
    """
    Update name, email or phone of the current user.

    Raises:
        HTTPException: 400 if the new email belongs to another account
    """
    if user_in.email and crud_user.email_exists(db, user_in.email, exclude_user_id=current_user.id):
        raise EmailAlreadyRegisteredException()
    return crud_user.update(db, db_obj=current_user, obj_in=user_in)


@router.put(
    "/me/password",
    status_code=status.HTTP_200_OK,
    summary="Change password",
)
def change_password(
    password_in: PasswordChange,
    current_user: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
) -> dict:
    if not verify_password(password_in.current_password, current_user.password_hash):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Current password is incorrect",
        )
    crud_user.update_password(db, user_id=current_user.id, new_password=password_in.new_password)
    logger.info(f"[AUTH] Password changed for user id={current_user.id}")
    return {"message": "Password updated successfully"}


@router.get(
    "/mothers",
    response_model=List[MotherListItem],
    status_code=status.HTTP_200_OK,
    summary="List all mothers",
    description="Mother directory with the number of children and maternal records of each. Doctors only.",
)
def list_mothers(
    current_user: User = Depends(require_role("doctor")),
    db: Session = Depends(get_db),
) -> List[MotherListItem]:
    return [
        MotherListItem(
            **UserResponse.model_validate(mother).model_dump(),
            children_count=children_count or 0,
            maternal_record_count=records_count or 0,
        )
        for mother, children_count, records_count in crud_user.get_mothers_with_counts(db)
    ]


@router.get(
    "/mothers/{mother_id}",
    response_model=MotherProfileResponse,
    status_code=status.HTTP_200_OK,
    summary="Get mother profile",
    description="Mother details, children, maternal health records and the last 12 records as a trend. Doctors only.",
)
def get_mother_profile(
    mother_id: int = Path(..., description="Mother user ID"),
    current_user: User = Depends(require_role("doctor")),
    db: Session = Depends(get_db),
) -> MotherProfileResponse:
    mother = crud_user.get_mother(db, mother_id)
    if mother is None:
        raise MotherNotFoundException()

    records = crud_mother_health_record.list_by_mother(db, mother_id=mother_id)
    trend = crud_mother_health_record.get_health_trend(db, mother_id=mother_id)
    children = crud_child.list_children(db, mother_id=mother_id)

    return MotherProfileResponse(
        mother=UserResponse.model_validate(mother),
        children=[ChildResponse.from_child(child) for child in children],
        latest_record=MotherHealthRecordResponse.model_validate(records[0]) if records else None,
        health_records=[MotherHealthRecordResponse.model_validate(r) for r in records],
        health_trend=[MotherHealthTrendPoint.model_validate(r) for r in trend],
    )
