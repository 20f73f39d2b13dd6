"""Report endpoints for doctors."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_db, require_role
from app.crud import crud_child, crud_health_record, crud_immunization
from app.models.user import User
from app.schemas.report import HealthRecordsReportResponse, VaccinationReportResponse
from app.services.vaccination_report import build_health_records_report, build_vaccination_report

router = APIRouter(prefix="/reports", tags=["Reports"])


@router.get(
    "/vaccination",
    response_model=VaccinationReportResponse,
    summary="Get Vaccination Coverage Report",
    description="""
    Coverage of the canonical vaccines (BCG, Hepatitis B, DPT, Polio, Measles, MMR)
    across all children. Vaccine names match when the canonical name appears
    anywhere in the recorded name, ignoring case. Each vaccine lists the
    children still missing it. Only accessible by doctors.
    """,
)
def get_vaccination_report(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_role("doctor"))
) -> VaccinationReportResponse:
    children = crud_child.list_children(db)
    return build_vaccination_report(children, crud_immunization.get_vaccine_names_by_child(db))


@router.get(
    "/health",
    response_model=HealthRecordsReportResponse,
    summary="Get Health Record Follow-up Report",
    description="Children with and without any health record. Only accessible by doctors.",
)
def get_health_records_report(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_role("doctor"))
) -> HealthRecordsReportResponse:
    children = crud_child.list_children(db)
    return build_health_records_report(children, crud_health_record.get_record_dates_by_child(db))
