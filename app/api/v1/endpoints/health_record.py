"""Health Record endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.orm import Session

from app.api.deps import get_accessible_child, get_current_active_user, get_db, require_role
from app.core.exceptions import ChildNotFoundException, HealthRecordNotFoundException
from app.crud import crud_child, crud_health_record
from app.models.health_record import HealthRecord
from app.models.user import User
from app.schemas.health_record import (
    GrowthPoint,
    GrowthTrendResponse,
    HealthRecordCreate,
    HealthRecordCreatedResponse,
    HealthRecordListResponse,
    HealthRecordResponse,
    HealthRecordUpdate,
)
from app.services.health_monitoring import health_monitoring_service

router = APIRouter(
    prefix="/health-records",
    tags=["Health Records"],
)


def _get_readable_record(db: Session, record_id: int, current_user: User) -> HealthRecord:
    """Load a record, checking the reader may see its child."""
    record = crud_health_record.get(db, record_id)
    if not record:
        raise HealthRecordNotFoundException()
    get_accessible_child(db, record.child_id, current_user)
    return record


# ==================== CREATE ====================

@router.post(
    "",
    response_model=HealthRecordCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new health record",
    description="""
    Record a child's measurement.

    **Required fields:**
    - child_id: ID of the child
    - weight: Weight in kg
    - height: Height in meters

    **Optional fields:**
    - record_date (defaults to today), vaccinations, doctor_notes
    - nutrition_status: overrides the label computed from the BMI

    The BMI is classified on save. An Underweight result raises an
    `underweight` alert, Overweight or Obese raise an `overweight` alert.

    **Access:** Doctors only
    """,
)
def create_health_record(
    record_in: HealthRecordCreate,
    current_user: User = Depends(require_role("doctor")),
    db: Session = Depends(get_db),
) -> HealthRecordCreatedResponse:
    child = crud_child.get(db, record_in.child_id)
    if not child:
        raise ChildNotFoundException()

    record, alert = health_monitoring_service.record_child_measurement(
        db, child=child, record_in=record_in
    )
    return HealthRecordCreatedResponse(
        **HealthRecordResponse.model_validate(record).model_dump(),
        alert_id=alert.id if alert else None,
        alert_type=alert.alert_type if alert else None,
    )


# ==================== READ ====================

@router.get(
    "/child/{child_id}",
    response_model=HealthRecordListResponse,
    status_code=status.HTTP_200_OK,
    summary="Get all health records of a child",
    description="Most recent first. Mothers can only read their own children's records.",
)
def get_child_health_records(
    child_id: int = Path(..., description="Child ID"),
    current_user: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
) -> HealthRecordListResponse:
    get_accessible_child(db, child_id, current_user)
    records = crud_health_record.list_by_child(db, child_id=child_id)
    return HealthRecordListResponse(
        records=[HealthRecordResponse.model_validate(record) for record in records],
        total=len(records)
    )


@router.get(
    "/child/{child_id}/growth-trend",
    response_model=GrowthTrendResponse,
    status_code=status.HTTP_200_OK,
    summary="Get growth trend of a child",
    description="Weight, height and BMI in chronological order.",
)
def get_growth_trend(
    child_id: int = Path(..., description="Child ID"),
    current_user: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
) -> GrowthTrendResponse:
    get_accessible_child(db, child_id, current_user)
    records = crud_health_record.get_growth_trend(db, child_id=child_id)
    return GrowthTrendResponse(
        child_id=child_id,
        points=[
            GrowthPoint(
                record_date=record.record_date,
                weight=record.weight,
                height=record.height,
                bmi=record.bmi,
            )
            for record in records
        ],
    )


@router.get(
    "/child/{child_id}/latest",
    response_model=HealthRecordResponse,
    status_code=status.HTTP_200_OK,
    summary="Get latest health record of a child",
)
def get_latest_health_record(
    child_id: int = Path(..., description="Child ID"),
    current_user: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
) -> HealthRecordResponse:
    get_accessible_child(db, child_id, current_user)
    record = crud_health_record.get_latest(db, child_id=child_id)
    if not record:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No health records for this child yet"
        )
    return HealthRecordResponse.model_validate(record)


@router.get(
    "/{record_id}",
    response_model=HealthRecordResponse,
    status_code=status.HTTP_200_OK,
    summary="Get health record by ID",
)
def get_health_record(
    record_id: int = Path(..., description="Health record ID"),
    current_user: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
) -> HealthRecordResponse:
    record = _get_readable_record(db, record_id, current_user)
    return HealthRecordResponse.model_validate(record)


# ==================== UPDATE ====================

@router.put(
    "/{record_id}",
    response_model=HealthRecordResponse,
    status_code=status.HTTP_200_OK,
    summary="Update a health record",
    description="""
    Partial update. Changing weight or height recomputes the nutrition label
    unless one is given explicitly. Edits do not raise new alerts.

    **Access:** Doctors only
    """,
)
def update_health_record(
    record_in: HealthRecordUpdate,
    record_id: int = Path(..., description="Health record ID"),
    current_user: User = Depends(require_role("doctor")),
    db: Session = Depends(get_db),
) -> HealthRecordResponse:
    record = crud_health_record.get(db, record_id)
    if not record:
        raise HealthRecordNotFoundException()

    record = health_monitoring_service.update_measurement(db, record=record, record_in=record_in)
    return HealthRecordResponse.model_validate(record)


# ==================== DELETE ====================

@router.delete(
    "/{record_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a health record",
    description="**Access:** Doctors only",
)
def delete_health_record(
    record_id: int = Path(..., description="Health record ID"),
    current_user: User = Depends(require_role("doctor")),
    db: Session = Depends(get_db),
) -> None:
    if not crud_health_record.delete(db, id=record_id):
        raise HealthRecordNotFoundException()
