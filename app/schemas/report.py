"""Report schemas for vaccination coverage and health record follow-up."""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field

from app.schemas.child import ChildResponse


class VaccineCoverage(BaseModel):
    """Coverage of one canonical vaccine across all children."""
    vaccine: str
    given: int = Field(..., description="Children with at least one matching record")
    total_children: int
    percentage: int = Field(..., description="given / total_children * 100, rounded")
    missing: List[ChildResponse] = Field(default_factory=list, description="Outreach cohort")


class ChildVaccinationStatus(BaseModel):
    child: ChildResponse
    given_vaccines: List[str]
    total_vaccines: int
    immunization_count: int


class VaccinationReportResponse(BaseModel):
    total_children: int
    total_vaccines_given: int
    average_vaccines_per_child: float
    vaccine_types_tracked: int
    coverage: List[VaccineCoverage]
    children: List[ChildVaccinationStatus]


class ChildRecordSummary(BaseModel):
    child: ChildResponse
    record_count: int
    last_record_date: Optional[date] = None


class HealthRecordsReportResponse(BaseModel):
    total_children: int
    children_with_records: int
    children_without_records: int
    with_records: List[ChildRecordSummary]
    without_records: List[ChildResponse]
