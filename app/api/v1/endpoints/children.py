"""Child endpoints."""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session

from app.api.deps import (
    get_accessible_child,
    get_current_active_user,
    get_db,
    mother_scope,
    require_role,
)
from app.crud import crud_alert, crud_child, crud_health_record, crud_immunization
from app.models.user import User
from app.schemas.alert import AlertResponse
from app.schemas.child import (
    ChildCreate,
    ChildResponse,
    ChildUpdate,
    ChildWithLatestRecord,
)
from app.schemas.health_record import GrowthPoint, HealthRecordResponse
from app.schemas.immunization import ImmunizationResponse
from app.schemas.profile import ChildProfileResponse
from app.services.health_monitoring import health_monitoring_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/children",
    tags=["Children"],
)


# ==================== CREATE ====================

@router.post(
    "",
    response_model=ChildResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a child",
    description="""
    Register a child for the current mother.

    **Required fields:**
    - name, dob (YYYY-MM-DD, not in the future), gender ('male' or 'female')

    **Optional fields:**
    - weight (kg, up to 20) and height (m, up to 2): when both are given an
      "Initial birth record" is stored, dated at the date of birth and labelled Normal.
    """,
)
def create_child(
    child_in: ChildCreate,
    current_user: User = Depends(require_role("mother")),
    db: Session = Depends(get_db),
) -> ChildResponse:
    child = crud_child.create_for_mother(db, child_in=child_in, mother_id=current_user.id)

    if child_in.weight is not None and child_in.height is not None:
        health_monitoring_service.create_initial_birth_record(
            db, child=child, weight=child_in.weight, height=child_in.height
        )

    logger.info(f"Child registered: id={child.id}, mother_id={current_user.id}")
    return ChildResponse.from_child(child)


# ==================== READ ====================

@router.get(
    "",
    response_model=List[ChildResponse],
    status_code=status.HTTP_200_OK,
    summary="List children",
    description="Mothers see their own children, doctors see all. `search` filters by name.",
)
def list_children(
    search: Optional[str] = Query(None, min_length=1, description="Part of the child's name"),
    current_user: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
) -> List[ChildResponse]:
    mother_id = mother_scope(current_user)
    if search:
        children = crud_child.search(db, term=search.strip(), mother_id=mother_id)
    else:
        children = crud_child.list_children(db, mother_id=mother_id)
    return [ChildResponse.from_child(child) for child in children]


@router.get(
    "/with-latest-records",
    response_model=List[ChildWithLatestRecord],
    status_code=status.HTTP_200_OK,
    summary="List children with their latest health record",
)
def list_children_with_latest_records(
    current_user: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
) -> List[ChildWithLatestRecord]:
    rows = crud_child.get_with_latest_records(db, mother_id=mother_scope(current_user))
    return [ChildWithLatestRecord.from_child_and_record(child, record) for child, record in rows]


@router.get(
    "/{child_id}",
    response_model=ChildProfileResponse,
    status_code=status.HTTP_200_OK,
    summary="Get child profile",
    description="Child details with age, health records, growth trend, immunizations and alerts.",
)
def get_child_profile(
    child_id: int = Path(..., description="Child ID"),
    current_user: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
) -> ChildProfileResponse:
    child = get_accessible_child(db, child_id, current_user)

    records = crud_health_record.list_by_child(db, child_id=child_id)
    trend = crud_health_record.get_growth_trend(db, child_id=child_id)

    return ChildProfileResponse(
        child=ChildResponse.from_child(child),
        latest_record=HealthRecordResponse.model_validate(records[0]) if records else None,
        health_records=[HealthRecordResponse.model_validate(r) for r in records],
        growth_trend=[
            GrowthPoint(record_date=r.record_date, weight=r.weight, height=r.height, bmi=r.bmi)
            for r in trend
        ],
        immunizations=[
            ImmunizationResponse.model_validate(i)
            for i in crud_immunization.list_by_child(db, child_id=child_id)
        ],
        alerts=[
            AlertResponse.model_validate(a)
            for a in crud_alert.get_filtered(db, child_id=child_id)
        ],
    )


# ==================== UPDATE ====================

@router.put(
    "/{child_id}",
    response_model=ChildResponse,
    status_code=status.HTTP_200_OK,
    summary="Update a child",
    description="Owner mother or any doctor.",
)
def update_child(
    child_in: ChildUpdate,
    child_id: int = Path(..., description="Child ID"),
    current_user: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
) -> ChildResponse:
    child = get_accessible_child(db, child_id, current_user)
    child = crud_child.update(db, db_obj=child, obj_in=child_in)
    return ChildResponse.from_child(child)


# ==================== DELETE ====================

@router.delete(
    "/{child_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a child",
    description="Removes the child with its health records, immunizations and alerts.",
)
def delete_child(
    child_id: int = Path(..., description="Child ID"),
    current_user: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
) -> None:
    get_accessible_child(db, child_id, current_user)
    crud_child.delete(db, id=child_id)
    logger.info(f"Child deleted: id={child_id}, by user_id={current_user.id}")
