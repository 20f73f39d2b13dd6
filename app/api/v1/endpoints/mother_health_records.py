"""Mother Health Record endpoints."""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session

from app.api.deps import get_current_active_user, get_db, require_role
from app.config import settings
from app.core.exceptions import (
    MotherHealthRecordNotFoundException,
    MotherNotFoundException,
    UnauthorizedAccessException,
)
from app.crud import crud_mother_health_record, crud_user
from app.models.mother_health_record import MotherHealthRecord
from app.models.user import User
from app.schemas.mother_health_record import (
    MotherHealthRecordCreate,
    MotherHealthRecordListResponse,
    MotherHealthRecordResponse,
    MotherHealthRecordUpdate,
    MotherHealthRecordWithMother,
    MotherHealthTrendPoint,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/mother-health-records",
    tags=["Mother Health Records"],
)


def _authorize_mother_access(db: Session, mother_id: int, current_user: User) -> User:
    """Doctors reach every mother; a mother only herself."""
    if current_user.role == "mother" and current_user.id != mother_id:
        raise UnauthorizedAccessException()
    mother = crud_user.get_mother(db, mother_id)
    if mother is None:
        raise MotherNotFoundException()
    return mother


def _with_mother(record: MotherHealthRecord) -> MotherHealthRecordWithMother:
    mother = record.mother
    return MotherHealthRecordWithMother(
        **MotherHealthRecordResponse.model_validate(record).model_dump(),
        mother_name=mother.name if mother else None,
        mother_email=mother.email if mother else None,
        mother_phone=mother.phone if mother else None,
    )


# ==================== CREATE ====================

@router.post(
    "",
    response_model=MotherHealthRecordResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a maternal health record",
    description="""
    **Required fields:**
    - mother_id
    - at least one of weight (0-200 kg), blood_pressure ('120/80'),
      hemoglobin (0-20 g/dL), blood_sugar (0-500 mg/dL)

    **Optional fields:**
    - record_type: general (default), prenatal or postnatal
    - pregnancy_week (1-42), delivery_date, delivery_type (normal, cesarean, assisted)
    - complications, medications, doctor_notes, next_checkup_date

    **Access:** Doctors only
    """,
)
def create_mother_health_record(
    record_in: MotherHealthRecordCreate,
    current_user: User = Depends(require_role("doctor")),
    db: Session = Depends(get_db),
) -> MotherHealthRecordResponse:
    if crud_user.get_mother(db, record_in.mother_id) is None:
        raise MotherNotFoundException()

    record = crud_mother_health_record.create(db, obj_in=record_in)
    logger.info(f"Mother health record created: id={record.id}, mother_id={record.mother_id}")
    return MotherHealthRecordResponse.model_validate(record)


# ==================== READ ====================

@router.get(
    "",
    response_model=List[MotherHealthRecordWithMother],
    status_code=status.HTTP_200_OK,
    summary="List maternal health records",
    description="Optional filters by record type and mother. Doctors only.",
)
def list_mother_health_records(
    record_type: Optional[str] = Query(None, pattern="^(general|prenatal|postnatal)$"),
    mother_id: Optional[int] = Query(None),
    current_user: User = Depends(require_role("doctor")),
    db: Session = Depends(get_db),
) -> List[MotherHealthRecordWithMother]:
    records = crud_mother_health_record.get_filtered(db, record_type=record_type, mother_id=mother_id)
    return [_with_mother(record) for record in records]


@router.get(
    "/upcoming-checkups",
    response_model=List[MotherHealthRecordWithMother],
    status_code=status.HTTP_200_OK,
    summary="Get upcoming maternal checkups",
    description="Records whose next checkup is between today and today + `days`. Doctors only.",
)
def get_upcoming_checkups(
    days: int = Query(settings.UPCOMING_CHECKUP_DAYS, ge=0, le=365),
    current_user: User = Depends(require_role("doctor")),
    db: Session = Depends(get_db),
) -> List[MotherHealthRecordWithMother]:
    records = crud_mother_health_record.get_upcoming_checkups(db, days_ahead=days)
    return [_with_mother(record) for record in records]


@router.get(
    "/mother/{mother_id}",
    response_model=MotherHealthRecordListResponse,
    status_code=status.HTTP_200_OK,
    summary="Get health records of a mother",
    description="Most recent first. A mother can read her own records.",
)
def get_records_by_mother(
    mother_id: int = Path(..., description="Mother user ID"),
    current_user: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
) -> MotherHealthRecordListResponse:
    _authorize_mother_access(db, mother_id, current_user)
    records = crud_mother_health_record.list_by_mother(db, mother_id=mother_id)
    return MotherHealthRecordListResponse(
        records=[MotherHealthRecordResponse.model_validate(r) for r in records],
        total=len(records),
    )


@router.get(
    "/mother/{mother_id}/trend",
    response_model=List[MotherHealthTrendPoint],
    status_code=status.HTTP_200_OK,
    summary="Get health trend of a mother",
    description="The last `limit` records in chronological order.",
)
def get_health_trend(
    mother_id: int = Path(..., description="Mother user ID"),
    limit: int = Query(12, ge=1, le=100),
    current_user: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
) -> List[MotherHealthTrendPoint]:
    _authorize_mother_access(db, mother_id, current_user)
    records = crud_mother_health_record.get_health_trend(db, mother_id=mother_id, limit=limit)
    return [MotherHealthTrendPoint.model_validate(r) for r in records]


@router.get(
    "/{record_id}",
    response_model=MotherHealthRecordResponse,
    status_code=status.HTTP_200_OK,
    summary="Get maternal health record by ID",
)
def get_mother_health_record(
    record_id: int = Path(..., description="Mother health record ID"),
    current_user: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
) -> MotherHealthRecordResponse:
    record = crud_mother_health_record.get(db, record_id)
    if not record:
        raise MotherHealthRecordNotFoundException()
    if current_user.role == "mother" and record.mother_id != current_user.id:
        raise UnauthorizedAccessException()
    return MotherHealthRecordResponse.model_validate(record)


# ==================== UPDATE ====================

@router.put(
    "/{record_id}",
    response_model=MotherHealthRecordResponse,
    status_code=status.HTTP_200_OK,
    summary="Update a maternal health record",
    description="**Access:** Doctors only",
)
def update_mother_health_record(
    record_in: MotherHealthRecordUpdate,
    record_id: int = Path(..., description="Mother health record ID"),
    current_user: User = Depends(require_role("doctor")),
    db: Session = Depends(get_db),
) -> MotherHealthRecordResponse:
    record = crud_mother_health_record.get(db, record_id)
    if not record:
        raise MotherHealthRecordNotFoundException()
    record = crud_mother_health_record.update(db, db_obj=record, obj_in=record_in)
    return MotherHealthRecordResponse.model_validate(record)


# ==================== DELETE ====================

@router.delete(
    "/{record_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a maternal health record",
    description="**Access:** Doctors only",
)
def delete_mother_health_record(
    record_id: int = Path(..., description="Mother health record ID"),
    current_user: User = Depends(require_role("doctor")),
    db: Session = Depends(get_db),
) -> None:
    if not crud_mother_health_record.delete(db, id=record_id):
        raise MotherHealthRecordNotFoundException()
