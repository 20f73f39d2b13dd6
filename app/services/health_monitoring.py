"""Service layer for child growth monitoring in CHMS.

Ties the pure growth rules to storage: every measurement is classified on
write, and an abnormal result raises exactly one pending alert in the same
transaction as the record.
"""

import logging
from typing import Optional, Tuple

from sqlalchemy.orm import Session

from app.config import settings
from app.crud.alert import crud_alert
from app.models.alert import Alert
from app.models.child import Child
from app.models.health_record import HealthRecord
from app.schemas.health_record import HealthRecordCreate, HealthRecordUpdate
from app.services.growth import NORMAL, assess_growth_status, build_growth_alert
from app.utils.dates import calculate_age_in_months

logger = logging.getLogger(__name__)

INITIAL_RECORD_NOTE = "Initial birth record"


class HealthMonitoringService:
    """
    Service for recording child measurements.

    Keeps the record, its nutrition label and any alert it triggers
    consistent with each other.
    """

    def record_child_measurement(
        self,
        db: Session,
        *,
        child: Child,
        record_in: HealthRecordCreate,
    ) -> Tuple[HealthRecord, Optional[Alert]]:
        """
        Store a health record and raise an alert for an abnormal result.

        Args:
            db: Database session
            child: The child being measured
            record_in: Measurement data; `nutrition_status` overrides the
                computed label when given

        Returns:
            (record, alert) where alert is None for a normal result

        Raises:
            SQLAlchemyError: If the write fails; nothing is persisted
        """
        age_months = calculate_age_in_months(child.dob, record_in.record_date)
        assessment = assess_growth_status(
            record_in.weight, record_in.height, age_months=age_months, gender=child.gender
        )
        alert_data = build_growth_alert(child.id, assessment)

        data = record_in.model_dump()
        data["nutrition_status"] = record_in.nutrition_status or assessment.status

        try:
            record = HealthRecord(**data)
            db.add(record)
            db.flush()

            alert = None
            if alert_data:
                alert = crud_alert.create_alert(db, commit=False, **alert_data)

            db.commit()
            db.refresh(record)
            if alert is not None:
                db.refresh(alert)
        except Exception as e:
            db.rollback()
            logger.error(f"[DB] Failed to store health record for child {child.id}: {str(e)}")
            raise

        logger.info(
            f"[GROWTH] Child {child.id}: BMI {assessment.bmi} -> {assessment.status}"
            + (f", {alert.alert_type} alert {alert.id} raised" if alert is not None else "")
        )
        return record, alert

    def create_initial_birth_record(
        self, db: Session, *, child: Child, weight: float, height: float
    ) -> HealthRecord:
        """Birth measurements entered with the child: labelled Normal, dated at birth, no alert."""
        record = HealthRecord(
            child_id=child.id,
            weight=weight,
            height=height,
            nutrition_status=NORMAL,
            doctor_notes=INITIAL_RECORD_NOTE,
            record_date=child.dob,
        )
        try:
            db.add(record)
            db.commit()
            db.refresh(record)
        except Exception:
            db.rollback()
            raise
        return record

    def update_measurement(
        self, db: Session, *, record: HealthRecord, record_in: HealthRecordUpdate
    ) -> HealthRecord:
        """Apply an edit; a changed weight or height relabels the record unless a label is given.

        Edits never raise new alerts.
        """
        data = record_in.model_dump(exclude_unset=True)
        for field, value in data.items():
            setattr(record, field, value)

        if ("weight" in data or "height" in data) and "nutrition_status" not in data:
            record.nutrition_status = assess_growth_status(record.weight, record.height).status

        try:
            db.add(record)
            db.commit()
            db.refresh(record)
        except Exception:
            db.rollback()
            raise
        return record

    def purge_resolved_alerts(self, db: Session, *, days_old: Optional[int] = None) -> int:
        """Delete resolved alerts past the retention window."""
        if days_old is None:
            days_old = settings.ALERT_RETENTION_DAYS
        return crud_alert.delete_old_resolved(db, days_old=days_old)


# Singleton instance
health_monitoring_service = HealthMonitoringService()
