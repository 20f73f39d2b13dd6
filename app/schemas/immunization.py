"""Pydantic schemas for `Immunization` domain objects."""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from app.services.immunization_schedule import days_overdue, days_until_due


class ImmunizationBase(BaseModel):
    vaccine_name: str
    date_given: date
    next_due_date: Optional[date] = None
    notes: Optional[str] = None

    @field_validator("vaccine_name")
    @classmethod
    def validate_vaccine_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("vaccine_name is required")
        return v

    @model_validator(mode="after")
    def due_after_given(self):
        if self.next_due_date is not None and self.next_due_date < self.date_given:
            raise ValueError("next_due_date cannot be before date_given")
        return self


class ImmunizationCreate(ImmunizationBase):
    child_id: int

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "child_id": 1,
            "vaccine_name": "DPT dose 1",
            "date_given": "2025-05-10",
            "next_due_date": "2025-06-07",
            "notes": "No reaction",
        }
    })


class ImmunizationUpdate(BaseModel):
    vaccine_name: Optional[str] = None
    date_given: Optional[date] = None
    next_due_date: Optional[date] = None
    notes: Optional[str] = None

    @field_validator("vaccine_name", "date_given", mode="before")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("Field cannot be null")
        return v

    @field_validator("vaccine_name")
    @classmethod
    def validate_vaccine_name(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("vaccine_name is required")
        return v


class ImmunizationResponse(BaseModel):
    id: int
    child_id: int
    vaccine_name: str
    date_given: date
    next_due_date: Optional[date] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class UpcomingImmunization(ImmunizationResponse):
    child_name: str
    days_until_due: int = Field(..., ge=0)

    @classmethod
    def from_immunization(cls, immunization, today: Optional[date] = None) -> "UpcomingImmunization":
        return cls(
            **ImmunizationResponse.model_validate(immunization).model_dump(),
            child_name=immunization.child.name,
            days_until_due=days_until_due(immunization.next_due_date, today),
        )


class OverdueImmunization(ImmunizationResponse):
    child_name: str
    mother_name: Optional[str] = None
    mother_email: Optional[str] = None
    days_overdue: int = Field(..., gt=0)

    @classmethod
    def from_immunization(cls, immunization, today: Optional[date] = None) -> "OverdueImmunization":
        mother = immunization.child.mother
        return cls(
            **ImmunizationResponse.model_validate(immunization).model_dump(),
            child_name=immunization.child.name,
            mother_name=mother.name if mother else None,
            mother_email=mother.email if mother else None,
            days_overdue=days_overdue(immunization.next_due_date, today),
        )


class ImmunizationListResponse(BaseModel):
    records: List[ImmunizationResponse]
    total: int
