"""Profile page schemas: everything shown for one child or one mother."""

from typing import List, Optional

from pydantic import BaseModel

from app.schemas.alert import AlertResponse
from app.schemas.child import ChildResponse
from app.schemas.health_record import GrowthPoint, HealthRecordResponse
from app.schemas.immunization import ImmunizationResponse
from app.schemas.mother_health_record import MotherHealthRecordResponse, MotherHealthTrendPoint
from app.schemas.user import UserResponse


class ChildProfileResponse(BaseModel):
    child: ChildResponse
    latest_record: Optional[HealthRecordResponse] = None
    health_records: List[HealthRecordResponse]
    growth_trend: List[GrowthPoint]
    immunizations: List[ImmunizationResponse]
    alerts: List[AlertResponse]


class MotherProfileResponse(BaseModel):
    mother: UserResponse
    children: List[ChildResponse]
    latest_record: Optional[MotherHealthRecordResponse] = None
    health_records: List[MotherHealthRecordResponse]
    health_trend: List[MotherHealthTrendPoint]
