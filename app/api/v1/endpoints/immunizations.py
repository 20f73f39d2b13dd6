"""Immunization endpoints."""

import logging
from datetime import date
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from sqlalchemy.orm import Session

from app.api.deps import (
    get_accessible_child,
    get_current_active_user,
    get_db,
    mother_scope,
    require_role,
)
from app.config import settings
from app.core.exceptions import ChildNotFoundException, ImmunizationNotFoundException
from app.crud import crud_child, crud_immunization
from app.models.user import User
from app.schemas.immunization import (
    ImmunizationCreate,
    ImmunizationListResponse,
    ImmunizationResponse,
    ImmunizationUpdate,
    OverdueImmunization,
    UpcomingImmunization,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/immunizations",
    tags=["Immunizations"],
)


# ==================== CREATE ====================

@router.post(
    "",
    response_model=ImmunizationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Record an immunization",
    description="""
    **Required fields:**
    - child_id, vaccine_name, date_given

    **Optional fields:**
    - next_due_date (not before date_given), notes

    **Access:** Doctors only
    """,
)
def create_immunization(
    immunization_in: ImmunizationCreate,
    current_user: User = Depends(require_role("doctor")),
    db: Session = Depends(get_db),
) -> ImmunizationResponse:
    if not crud_child.get(db, immunization_in.child_id):
        raise ChildNotFoundException()

    immunization = crud_immunization.create(db, obj_in=immunization_in)
    logger.info(
        f"Immunization recorded: id={immunization.id}, child_id={immunization.child_id}, "
        f"vaccine={immunization.vaccine_name}"
    )
    return ImmunizationResponse.model_validate(immunization)


# ==================== READ ====================

@router.get(
    "/child/{child_id}",
    response_model=ImmunizationListResponse,
    status_code=status.HTTP_200_OK,
    summary="Get immunization history of a child",
    description="Most recent dose first.",
)
def get_child_immunizations(
    child_id: int = Path(..., description="Child ID"),
    current_user: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
) -> ImmunizationListResponse:
    get_accessible_child(db, child_id, current_user)
    records = crud_immunization.list_by_child(db, child_id=child_id)
    return ImmunizationListResponse(
        records=[ImmunizationResponse.model_validate(r) for r in records],
        total=len(records),
    )


@router.get(
    "/upcoming",
    response_model=List[UpcomingImmunization],
    status_code=status.HTTP_200_OK,
    summary="Get upcoming vaccinations",
    description="Follow-ups due between today and today + `days` (inclusive). Mothers see their own children.",
)
def get_upcoming_immunizations(
    days: int = Query(settings.UPCOMING_VACCINATION_DAYS, ge=0, le=365, description="Look-ahead window in days"),
    current_user: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
) -> List[UpcomingImmunization]:
    today = date.today()
    records = crud_immunization.get_upcoming(
        db, days_ahead=days, mother_id=mother_scope(current_user), today=today
    )
    return [UpcomingImmunization.from_immunization(r, today) for r in records]


@router.get(
    "/overdue",
    response_model=List[OverdueImmunization],
    status_code=status.HTTP_200_OK,
    summary="Get overdue vaccinations",
    description="Follow-ups whose due date has passed. Mothers see their own children.",
)
def get_overdue_immunizations(
    current_user: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
) -> List[OverdueImmunization]:
    today = date.today()
    records = crud_immunization.get_overdue(db, mother_id=mother_scope(current_user), today=today)
    return [OverdueImmunization.from_immunization(r, today) for r in records]


@router.get(
    "/{immunization_id}",
    response_model=ImmunizationResponse,
    status_code=status.HTTP_200_OK,
    summary="Get immunization by ID",
)
def get_immunization(
    immunization_id: int = Path(..., description="Immunization ID"),
    current_user: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
) -> ImmunizationResponse:
    immunization = crud_immunization.get(db, immunization_id)
    if not immunization:
        raise ImmunizationNotFoundException()
    get_accessible_child(db, immunization.child_id, current_user)
    return ImmunizationResponse.model_validate(immunization)


# ==================== UPDATE ====================

@router.put(
    "/{immunization_id}",
    response_model=ImmunizationResponse,
    status_code=status.HTTP_200_OK,
    summary="Update an immunization",
    description="**Access:** Doctors only",
)
def update_immunization(
    immunization_in: ImmunizationUpdate,
    immunization_id: int = Path(..., description="Immunization ID"),
    current_user: User = Depends(require_role("doctor")),
    db: Session = Depends(get_db),
) -> ImmunizationResponse:
    immunization = crud_immunization.get(db, immunization_id)
    if not immunization:
        raise ImmunizationNotFoundException()

    # Check the merged dates, not only the submitted ones
    changes = immunization_in.model_dump(exclude_unset=True)
    date_given = changes.get("date_given", immunization.date_given)
    next_due_date = changes.get("next_due_date", immunization.next_due_date)
    if date_given and next_due_date and next_due_date < date_given:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="next_due_date cannot be before date_given"
        )

    immunization = crud_immunization.update(db, db_obj=immunization, obj_in=immunization_in)
    return ImmunizationResponse.model_validate(immunization)


# ==================== DELETE ====================

@router.delete(
    "/{immunization_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an immunization",
    description="**Access:** Doctors only",
)
def delete_immunization(
    immunization_id: int = Path(..., description="Immunization ID"),
    current_user: User = Depends(require_role("doctor")),
    db: Session = Depends(get_db),
) -> None:
    if not crud_immunization.delete(db, id=immunization_id):
        raise ImmunizationNotFoundException()
