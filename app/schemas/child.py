"""Pydantic schemas for `Child` domain objects."""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.utils.dates import calculate_age_in_months, format_age


GENDER_VALUES = {"male", "female"}


class ChildBase(BaseModel):
    name: str
    dob: date
    gender: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name is required")
        return v

    @field_validator("dob")
    @classmethod
    def validate_dob(cls, v: date) -> date:
        if v > date.today():
            raise ValueError("Date of birth cannot be in the future")
        return v

    @field_validator("gender")
    @classmethod
    def validate_gender(cls, v: str) -> str:
        if v not in GENDER_VALUES:
            raise ValueError(f"gender must be one of {sorted(GENDER_VALUES)}")
        return v


class ChildCreate(ChildBase):
    # Optional birth measurements; both must be given to create the initial record
    weight: Optional[float] = Field(None, gt=0, le=20, description="Birth weight in kg")
    height: Optional[float] = Field(None, gt=0, le=2, description="Birth length in m")

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "name": "Baraka",
            "dob": "2025-03-14",
            "gender": "male",
            "weight": 3.2,
            "height": 0.5,
        }
    })


class ChildUpdate(BaseModel):
    name: Optional[str] = None
    dob: Optional[date] = None
    gender: Optional[str] = None

    @field_validator("name", "dob", "gender", mode="before")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("Field cannot be null")
        return v

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("Name is required")
        return v

    @field_validator("dob")
    @classmethod
    def validate_dob(cls, v: Optional[date]) -> Optional[date]:
        if v is not None and v > date.today():
            raise ValueError("Date of birth cannot be in the future")
        return v

    @field_validator("gender")
    @classmethod
    def validate_gender(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and v not in GENDER_VALUES:
            raise ValueError(f"gender must be one of {sorted(GENDER_VALUES)}")
        return v


class ChildResponse(BaseModel):
    id: int
    mother_id: int
    name: str
    dob: date
    gender: str
    age_months: int
    age_display: str
    mother_name: Optional[str] = None
    mother_email: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_child(cls, child, today: Optional[date] = None) -> "ChildResponse":
        """Build the response with the age derived from the date of birth."""
        mother = getattr(child, "mother", None)
        return cls(
            id=child.id,
            mother_id=child.mother_id,
            name=child.name,
            dob=child.dob,
            gender=child.gender,
            age_months=calculate_age_in_months(child.dob, today),
            age_display=format_age(child.dob, today),
            mother_name=getattr(mother, "name", None),
            mother_email=getattr(mother, "email", None),
            created_at=getattr(child, "created_at", None),
        )


class ChildWithLatestRecord(ChildResponse):
    """Child row joined with its most recent health record, if any."""
    weight: Optional[float] = None
    height: Optional[float] = None
    nutrition_status: Optional[str] = None
    record_date: Optional[date] = None

    @classmethod
    def from_child_and_record(cls, child, record, today: Optional[date] = None) -> "ChildWithLatestRecord":
        data = ChildResponse.from_child(child, today).model_dump()
        if record is not None:
            data.update(
                weight=record.weight,
                height=record.height,
                nutrition_status=record.nutrition_status,
                record_date=record.record_date,
            )
        return cls(**data)
