"""CRUD operations for `Alert` model."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional

from sqlalchemy import and_, delete, func, select
from sqlalchemy.orm import Session, joinedload

from app.crud.base import CRUDBase
from app.models.alert import Alert
from app.models.child import Child
from app.schemas.alert import AlertCreate

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    """Naive UTC, the same clock the database uses for `created_at`."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class CRUDAlert(CRUDBase[Alert, AlertCreate, AlertCreate]):
    def create_alert(
        self, db: Session, *, child_id: int, alert_type: str, message: str, commit: bool = True
    ) -> Alert:
        """Create a pending alert.

        With ``commit=False`` the alert is only added and flushed so that the
        caller can commit it together with the record that triggered it.
        """
        alert = Alert(child_id=child_id, alert_type=alert_type, message=message, status="pending")
        if not commit:
            db.add(alert)
            db.flush()
            return alert
        alert = self._save(db, alert)
        logger.info(f"[ALERT] Created {alert_type} alert {alert.id} for child {child_id}")
        return alert

    def get_filtered(
        self,
        db: Session,
        *,
        status: Optional[str] = None,
        child_id: Optional[int] = None,
        mother_id: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> List[Alert]:
        """Alerts with child and mother loaded, newest first."""
        conditions = []
        if status is not None:
            conditions.append(Alert.status == status)
        if child_id is not None:
            conditions.append(Alert.child_id == child_id)
        if mother_id is not None:
            conditions.append(Child.mother_id == mother_id)

        stmt = (
            select(Alert)
            .join(Child, Alert.child_id == Child.id)
            .options(joinedload(Alert.child).joinedload(Child.mother))
        )
        if conditions:
            stmt = stmt.where(and_(*conditions))
        stmt = stmt.order_by(Alert.created_at.desc(), Alert.id.desc())
        if limit is not None:
            stmt = stmt.limit(limit)
        return list(db.scalars(stmt).unique().all())

    def count_pending(self, db: Session, *, mother_id: Optional[int] = None) -> int:
        stmt = select(func.count(Alert.id)).where(Alert.status == "pending")
        if mother_id is not None:
            stmt = stmt.join(Child, Alert.child_id == Child.id).where(Child.mother_id == mother_id)
        return db.scalar(stmt) or 0

    def get_by_type(
        self, db: Session, *, alert_type: str, status: Optional[str] = None
    ) -> List[Alert]:
        conditions = [Alert.alert_type == alert_type]
        if status is not None:
            conditions.append(Alert.status == status)
        stmt = select(Alert).where(and_(*conditions)).order_by(Alert.created_at.desc(), Alert.id.desc())
        return list(db.scalars(stmt).all())

    def resolve(self, db: Session, *, alert_id: int, now: Optional[datetime] = None) -> bool:
        """Move a pending alert to resolved.

        Returns False, leaving the row untouched, when the alert is missing or
        already resolved. A resolved alert never goes back to pending.
        """
        alert = self.get(db, alert_id)
        if alert is None or alert.status != "pending":
            return False

        alert.status = "resolved"
        alert.resolved_at = now or utc_now()
        self._save(db, alert)
        logger.info(f"[ALERT] Resolved alert {alert_id}")
        return True

    def get_statistics(self, db: Session) -> Dict[str, int]:
        """Alert count per status; both statuses are always present."""
        stmt = select(Alert.status, func.count(Alert.id)).group_by(Alert.status)
        counts = {"pending": 0, "resolved": 0}
        counts.update({status: count for status, count in db.execute(stmt).all()})
        return counts

    def delete_old_resolved(
        self, db: Session, *, days_old: int = 30, now: Optional[datetime] = None
    ) -> int:
        """Delete resolved alerts created more than `days_old` days ago.

        Pending alerts are never purged regardless of age.
        """
        cutoff = (now or utc_now()) - timedelta(days=days_old)
        stmt = delete(Alert).where(and_(Alert.status == "resolved", Alert.created_at < cutoff))
        try:
            result = db.execute(stmt, execution_options={"synchronize_session": False})
            db.commit()
        except Exception:
            db.rollback()
            raise
        deleted = result.rowcount or 0
        logger.info(f"[ALERT] Purged {deleted} resolved alerts older than {days_old} days")
        return deleted


# Singleton instance
crud_alert = CRUDAlert(Alert)
