"""Pydantic schemas for `MotherHealthRecord` domain objects."""

import re
from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


RECORD_TYPES = {"general", "prenatal", "postnatal"}
DELIVERY_TYPES = {"normal", "cesarean", "assisted"}

BLOOD_PRESSURE_PATTERN = re.compile(r"^\d{2,3}/\d{2,3}$")


def _validate_record_type(v: Optional[str]) -> Optional[str]:
    if v is not None and v not in RECORD_TYPES:
        raise ValueError(f"record_type must be one of {sorted(RECORD_TYPES)}")
    return v


def _validate_delivery_type(v: Optional[str]) -> Optional[str]:
    if v is not None and v not in DELIVERY_TYPES:
        raise ValueError(f"delivery_type must be one of {sorted(DELIVERY_TYPES)}")
    return v


def _validate_blood_pressure(v: Optional[str]) -> Optional[str]:
    if v is None:
        return v
    v = v.strip()
    if not BLOOD_PRESSURE_PATTERN.match(v):
        raise ValueError("blood_pressure must look like 'systolic/diastolic', e.g. 120/80")
    return v


class MotherHealthRecordBase(BaseModel):
    record_type: str = "general"
    record_date: date = Field(default_factory=date.today)

    # Vital Signs
    weight: Optional[float] = Field(None, gt=0, le=200, description="Weight in kg")
    blood_pressure: Optional[str] = Field(None, description="systolic/diastolic, e.g. 120/80")
    hemoglobin: Optional[float] = Field(None, gt=0, le=20, description="g/dL")
    blood_sugar: Optional[float] = Field(None, gt=0, le=500, description="mg/dL")

    # Prenatal
    pregnancy_week: Optional[int] = Field(None, ge=1, le=42)

    # Postnatal
    delivery_date: Optional[date] = None
    delivery_type: Optional[str] = None

    complications: Optional[str] = None
    medications: Optional[str] = None
    doctor_notes: Optional[str] = None
    next_checkup_date: Optional[date] = None

    @field_validator("record_type")
    @classmethod
    def validate_record_type(cls, v: str) -> str:
        return _validate_record_type(v)

    @field_validator("delivery_type")
    @classmethod
    def validate_delivery_type(cls, v: Optional[str]) -> Optional[str]:
        return _validate_delivery_type(v)

    @field_validator("blood_pressure")
    @classmethod
    def validate_blood_pressure(cls, v: Optional[str]) -> Optional[str]:
        return _validate_blood_pressure(v)


class MotherHealthRecordCreate(MotherHealthRecordBase):
    mother_id: int

    @model_validator(mode="after")
    def require_a_vital(self) -> "MotherHealthRecordCreate":
        if all(
            value is None
            for value in (self.weight, self.blood_pressure, self.hemoglobin, self.blood_sugar)
        ):
            raise ValueError(
                "Enter at least one vital measurement (weight, blood pressure, hemoglobin, or blood sugar)"
            )
        return self

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "mother_id": 2,
            "record_type": "prenatal",
            "record_date": "2025-09-01",
            "weight": 65.5,
            "blood_pressure": "120/80",
            "hemoglobin": 12.5,
            "blood_sugar": 95.0,
            "pregnancy_week": 28,
            "medications": "Iron and folic acid",
            "next_checkup_date": "2025-09-29",
        }
    })


class MotherHealthRecordUpdate(BaseModel):
    record_type: Optional[str] = None
    weight: Optional[float] = Field(None, gt=0, le=200)
    blood_pressure: Optional[str] = None
    hemoglobin: Optional[float] = Field(None, gt=0, le=20)
    blood_sugar: Optional[float] = Field(None, gt=0, le=500)
    pregnancy_week: Optional[int] = Field(None, ge=1, le=42)
    delivery_date: Optional[date] = None
    delivery_type: Optional[str] = None
    complications: Optional[str] = None
    medications: Optional[str] = None
    doctor_notes: Optional[str] = None
    next_checkup_date: Optional[date] = None

    @model_validator(mode="before")
    @classmethod
    def record_date_is_fixed(cls, data):
        # record_date orders the health trend and never changes after creation
        if isinstance(data, dict) and "record_date" in data:
            raise ValueError("record_date cannot be changed")
        return data

    @field_validator("record_type", mode="before")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("Field cannot be null")
        return v

    @field_validator("record_type")
    @classmethod
    def validate_record_type(cls, v: Optional[str]) -> Optional[str]:
        return _validate_record_type(v)

    @field_validator("delivery_type")
    @classmethod
    def validate_delivery_type(cls, v: Optional[str]) -> Optional[str]:
        return _validate_delivery_type(v)

    @field_validator("blood_pressure")
    @classmethod
    def validate_blood_pressure(cls, v: Optional[str]) -> Optional[str]:
        return _validate_blood_pressure(v)


class MotherHealthRecordResponse(MotherHealthRecordBase):
    id: int
    mother_id: int
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class MotherHealthRecordWithMother(MotherHealthRecordResponse):
    mother_name: Optional[str] = None
    mother_email: Optional[str] = None
    mother_phone: Optional[str] = None


class MotherHealthRecordListResponse(BaseModel):
    records: List[MotherHealthRecordResponse]
    total: int


class MotherHealthTrendPoint(BaseModel):
    record_date: date
    record_type: str
    weight: Optional[float] = None
    blood_pressure: Optional[str] = None
    hemoglobin: Optional[float] = None
    blood_sugar: Optional[float] = None

    model_config = ConfigDict(from_attributes=True)
