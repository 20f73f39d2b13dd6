"""CRUD operations for `HealthRecord` model."""

from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import Any, Dict, List, Optional

from sqlalchemy import select, and_, func
from sqlalchemy.orm import Session

from app.crud.base import CRUDBase
from app.models.health_record import HealthRecord
from app.schemas.health_record import HealthRecordCreate, HealthRecordUpdate


class CRUDHealthRecord(CRUDBase[HealthRecord, HealthRecordCreate, HealthRecordUpdate]):
    def list_by_child(
        self, db: Session, *, child_id: int, limit: Optional[int] = None
    ) -> List[HealthRecord]:
        """Health records for a child, most recent first (same date: newest insert first)."""
        stmt = (
            select(HealthRecord)
            .where(HealthRecord.child_id == child_id)
            .order_by(HealthRecord.record_date.desc(), HealthRecord.id.desc())
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        return list(db.scalars(stmt).all())

    def get_latest(self, db: Session, *, child_id: int) -> Optional[HealthRecord]:
        """Get the most recent health record for a child."""
        records = self.list_by_child(db, child_id=child_id, limit=1)
        return records[0] if records else None

    def get_growth_trend(self, db: Session, *, child_id: int) -> List[HealthRecord]:
        """Records in chronological order for plotting weight/height over time."""
        stmt = (
            select(HealthRecord)
            .where(HealthRecord.child_id == child_id)
            .order_by(HealthRecord.record_date.asc(), HealthRecord.id.asc())
        )
        return list(db.scalars(stmt).all())

    def get_by_date_range(
        self,
        db: Session,
        *,
        child_id: int,
        start_date: date,
        end_date: date,
    ) -> List[HealthRecord]:
        """Get health records within an inclusive date range."""
        stmt = (
            select(HealthRecord)
            .where(
                and_(
                    HealthRecord.child_id == child_id,
                    HealthRecord.record_date >= start_date,
                    HealthRecord.record_date <= end_date,
                )
            )
            .order_by(HealthRecord.record_date.desc(), HealthRecord.id.desc())
        )
        return list(db.scalars(stmt).all())

    def get_recent(self, db: Session, *, limit: int = 10) -> List[HealthRecord]:
        """Most recent records across all children."""
        stmt = (
            select(HealthRecord)
            .order_by(HealthRecord.record_date.desc(), HealthRecord.id.desc())
            .limit(limit)
        )
        return list(db.scalars(stmt).all())

    def record_exists_for_date(
        self,
        db: Session,
        *,
        child_id: int,
        record_date: date,
        exclude_record_id: Optional[int] = None,
    ) -> bool:
        conditions = [HealthRecord.child_id == child_id, HealthRecord.record_date == record_date]
        if exclude_record_id is not None:
            conditions.append(HealthRecord.id != exclude_record_id)
        return self.count(db, conditions) > 0

    def get_record_dates_by_child(self, db: Session) -> Dict[int, List[date]]:
        """child id -> record dates, for children that have any record."""
        dates: Dict[int, List[date]] = defaultdict(list)
        for child_id, record_date in db.execute(select(HealthRecord.child_id, HealthRecord.record_date)).all():
            dates[child_id].append(record_date)
        return dict(dates)

    def get_statistics(self, db: Session) -> Dict[str, Any]:
        stmt = select(
            func.count(HealthRecord.id),
            func.count(func.distinct(HealthRecord.child_id)),
            func.avg(HealthRecord.weight),
            func.avg(HealthRecord.height),
        )
        total, children, avg_weight, avg_height = db.execute(stmt).one()
        return {
            "total_records": total or 0,
            "children_monitored": children or 0,
            "avg_weight": round(float(avg_weight), 2) if avg_weight is not None else None,
            "avg_height": round(float(avg_height), 2) if avg_height is not None else None,
        }


# Singleton instance
crud_health_record = CRUDHealthRecord(HealthRecord)
