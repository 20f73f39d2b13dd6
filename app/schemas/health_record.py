"""Pydantic schemas for `HealthRecord` domain objects."""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from app.services.growth import NUTRITION_STATUSES


def _validate_status(v: Optional[str]) -> Optional[str]:
    if v is not None and v not in NUTRITION_STATUSES:
        raise ValueError(f"nutrition_status must be one of {list(NUTRITION_STATUSES)}")
    return v


class HealthRecordBase(BaseModel):
    child_id: int
    weight: float = Field(..., gt=0, le=200, description="Weight in kg")
    height: float = Field(..., gt=0, le=2.5, description="Height in meters")
    record_date: date = Field(default_factory=date.today)

    vaccinations: Optional[str] = None
    doctor_notes: Optional[str] = None

    @field_validator("record_date")
    @classmethod
    def validate_record_date(cls, v: date) -> date:
        if v > date.today():
            raise ValueError("record_date cannot be in the future")
        return v


class HealthRecordCreate(HealthRecordBase):
    # Computed from the BMI bands when omitted
    nutrition_status: Optional[str] = None

    @field_validator("nutrition_status")
    @classmethod
    def validate_nutrition_status(cls, v: Optional[str]) -> Optional[str]:
        return _validate_status(v)

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "child_id": 1,
            "weight": 9.6,
            "height": 0.75,
            "record_date": "2025-09-01",
            "vaccinations": "Measles dose 1",
            "doctor_notes": "Healthy, feeding well",
        }
    })


class HealthRecordUpdate(BaseModel):
    weight: Optional[float] = Field(None, gt=0, le=200)
    height: Optional[float] = Field(None, gt=0, le=2.5)
    nutrition_status: Optional[str] = None
    vaccinations: Optional[str] = None
    doctor_notes: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def record_date_is_fixed(cls, data):
        # record_date orders the growth trend and never changes after creation
        if isinstance(data, dict) and "record_date" in data:
            raise ValueError("record_date cannot be changed")
        return data

    @field_validator("weight", "height", "nutrition_status", mode="before")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("Field cannot be null")
        return v

    @field_validator("nutrition_status")
    @classmethod
    def validate_nutrition_status(cls, v: Optional[str]) -> Optional[str]:
        return _validate_status(v)


class HealthRecordResponse(BaseModel):
    id: int
    child_id: int
    weight: float
    height: float
    bmi: Optional[float] = None
    nutrition_status: str
    vaccinations: Optional[str] = None
    doctor_notes: Optional[str] = None
    record_date: date
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class HealthRecordCreatedResponse(HealthRecordResponse):
    """Create response: the record plus the alert it raised, if any."""
    alert_id: Optional[int] = None
    alert_type: Optional[str] = None


class HealthRecordListResponse(BaseModel):
    """Response for listing health records."""
    records: List[HealthRecordResponse]
    total: int


class GrowthPoint(BaseModel):
    record_date: date
    weight: float
    height: float
    bmi: float


class GrowthTrendResponse(BaseModel):
    child_id: int
    points: List[GrowthPoint]
