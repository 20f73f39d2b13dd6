"""Pydantic schemas for `Alert` domain objects."""

import re
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


ALERT_STATUSES = {"pending", "resolved"}
ALERT_TYPE_PATTERN = re.compile(r"^[a-z][a-z0-9_]{0,49}$")


class AlertCreate(BaseModel):
    """Manual alert entry by a doctor; status always starts as pending."""
    child_id: int
    alert_type: str
    message: str

    @field_validator("alert_type")
    @classmethod
    def validate_alert_type(cls, v: str) -> str:
        v = v.strip().lower()
        if not ALERT_TYPE_PATTERN.match(v):
            raise ValueError("alert_type must be a lowercase identifier, e.g. 'missed_checkup'")
        return v

    @field_validator("message")
    @classmethod
    def validate_message(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("message is required")
        return v

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "child_id": 1,
            "alert_type": "missed_checkup",
            "message": "Child missed the 9-month growth check.",
        }
    })


class AlertResponse(BaseModel):
    id: int
    child_id: int
    alert_type: str
    message: str
    status: str
    created_at: Optional[datetime] = None
    resolved_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class AlertWithChild(AlertResponse):
    child_name: Optional[str] = None
    mother_name: Optional[str] = None
    mother_email: Optional[str] = None

    @classmethod
    def from_alert(cls, alert) -> "AlertWithChild":
        child = alert.child
        mother = getattr(child, "mother", None)
        return cls(
            **AlertResponse.model_validate(alert).model_dump(),
            child_name=getattr(child, "name", None),
            mother_name=getattr(mother, "name", None),
            mother_email=getattr(mother, "email", None),
        )


class AlertResolveResponse(BaseModel):
    alert: AlertResponse
    changed: bool


class AlertPurgeResponse(BaseModel):
    deleted: int
    retention_days: int
