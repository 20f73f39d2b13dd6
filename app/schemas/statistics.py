"""Statistics and dashboard schemas."""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from app.schemas.alert import AlertWithChild
from app.schemas.child import ChildResponse, ChildWithLatestRecord
from app.schemas.health_record import HealthRecordResponse
from app.schemas.immunization import OverdueImmunization, UpcomingImmunization


class ChildStatistics(BaseModel):
    total_children: int = Field(..., description="Total registered children")
    male_count: int = 0
    female_count: int = 0
    avg_age_months: Optional[float] = Field(None, description="Average age in months")


class HealthRecordStatistics(BaseModel):
    total_records: int = 0
    children_monitored: int = Field(0, description="Children with at least one record")
    avg_weight: Optional[float] = None
    avg_height: Optional[float] = None


class ImmunizationStatistics(BaseModel):
    """Counts over immunizations that have a follow-up date."""
    total_immunizations: int = 0
    children_immunized: int = 0
    overdue_count: int = 0
    upcoming_count: int = 0


class MotherRecordTypeStatistics(BaseModel):
    count: int
    unique_mothers: int


class DoctorDashboardResponse(BaseModel):
    child_statistics: ChildStatistics
    health_statistics: HealthRecordStatistics
    alert_statistics: Dict[str, int] = Field(..., description="Alert count per status")
    immunization_statistics: ImmunizationStatistics
    user_statistics: Dict[str, int] = Field(..., description="User count per role")
    mother_health_statistics: Dict[str, MotherRecordTypeStatistics]
    recent_children: List[ChildResponse]
    recent_health_records: List[HealthRecordResponse]
    pending_alerts: List[AlertWithChild]
    overdue_vaccinations: List[OverdueImmunization]


class MotherDashboardResponse(BaseModel):
    child_statistics: ChildStatistics
    children: List[ChildWithLatestRecord]
    pending_alerts: List[AlertWithChild]
    upcoming_vaccinations: List[UpcomingImmunization]
