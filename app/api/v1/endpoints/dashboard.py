"""Dashboard endpoints: the data behind the doctor and mother home screens."""

from datetime import date

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_db, require_role
from app.config import settings
from app.crud import (
    crud_alert,
    crud_child,
    crud_health_record,
    crud_immunization,
    crud_mother_health_record,
    crud_user,
)
from app.models.user import User
from app.schemas.alert import AlertWithChild
from app.schemas.child import ChildResponse, ChildWithLatestRecord
from app.schemas.health_record import HealthRecordResponse
from app.schemas.immunization import OverdueImmunization, UpcomingImmunization
from app.schemas.statistics import (
    ChildStatistics,
    DoctorDashboardResponse,
    HealthRecordStatistics,
    ImmunizationStatistics,
    MotherDashboardResponse,
)

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])

RECENT_LIMIT = 10


@router.get(
    "/doctor",
    response_model=DoctorDashboardResponse,
    summary="Get Doctor Dashboard",
    description="""
    Statistics for children, health records, alerts, immunizations, users and
    maternal records, plus the ten most recent children and health records,
    pending alerts and overdue vaccinations. Only accessible by doctors.
    """,
)
def get_doctor_dashboard(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_role("doctor"))
) -> DoctorDashboardResponse:
    today = date.today()

    # ===== STATISTICS =====
    child_stats = crud_child.get_statistics(db, today=today)
    health_stats = crud_health_record.get_statistics(db)
    immunization_stats = crud_immunization.get_statistics(db, today=today)

    # ===== RECENT ACTIVITY =====
    recent_children = crud_child.list_children(db)[:RECENT_LIMIT]
    recent_records = crud_health_record.get_recent(db, limit=RECENT_LIMIT)
    pending_alerts = crud_alert.get_filtered(db, status="pending")
    overdue = crud_immunization.get_overdue(db, today=today)

    return DoctorDashboardResponse(
        child_statistics=ChildStatistics(**child_stats),
        health_statistics=HealthRecordStatistics(**health_stats),
        alert_statistics=crud_alert.get_statistics(db),
        immunization_statistics=ImmunizationStatistics(**immunization_stats),
        user_statistics=crud_user.get_statistics(db),
        mother_health_statistics=crud_mother_health_record.get_statistics(db),
        recent_children=[ChildResponse.from_child(child, today) for child in recent_children],
        recent_health_records=[HealthRecordResponse.model_validate(r) for r in recent_records],
        pending_alerts=[AlertWithChild.from_alert(alert) for alert in pending_alerts],
        overdue_vaccinations=[OverdueImmunization.from_immunization(i, today) for i in overdue],
    )


@router.get(
    "/mother",
    response_model=MotherDashboardResponse,
    summary="Get Mother Dashboard",
    description="""
    The current mother's children with their latest health record, their
    pending alerts and vaccinations due soon. Only accessible by mothers.
    """,
)
def get_mother_dashboard(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_role("mother"))
) -> MotherDashboardResponse:
    today = date.today()
    mother_id = current_user.id

    children = crud_child.get_with_latest_records(db, mother_id=mother_id)
    pending_alerts = crud_alert.get_filtered(db, status="pending", mother_id=mother_id)
    upcoming = crud_immunization.get_upcoming(
        db,
        days_ahead=settings.UPCOMING_VACCINATION_DAYS,
        mother_id=mother_id,
        today=today,
    )

    return MotherDashboardResponse(
        child_statistics=ChildStatistics(**crud_child.get_statistics(db, mother_id=mother_id, today=today)),
        children=[ChildWithLatestRecord.from_child_and_record(child, record, today) for child, record in children],
        pending_alerts=[AlertWithChild.from_alert(alert) for alert in pending_alerts],
        upcoming_vaccinations=[UpcomingImmunization.from_immunization(i, today) for i in upcoming],
    )
