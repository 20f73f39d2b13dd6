"""CRUD operations for `MotherHealthRecord` model."""

from __future__ import annotations

from datetime import date
from typing import Dict, List, Optional

from sqlalchemy import and_, func, select
from sqlalchemy.orm import Session

from app.crud.base import CRUDBase
from app.models.mother_health_record import MotherHealthRecord
from app.schemas.mother_health_record import MotherHealthRecordCreate, MotherHealthRecordUpdate
from app.services.immunization_schedule import upcoming_window


class CRUDMotherHealthRecord(
    CRUDBase[MotherHealthRecord, MotherHealthRecordCreate, MotherHealthRecordUpdate]
):
    def _ordered(self, stmt):
        return stmt.order_by(MotherHealthRecord.record_date.desc(), MotherHealthRecord.id.desc())

    def get_filtered(
        self,
        db: Session,
        *,
        record_type: Optional[str] = None,
        mother_id: Optional[int] = None,
    ) -> List[MotherHealthRecord]:
        """Records filtered by type and/or mother, most recent first."""
        conditions = []
        if record_type is not None:
            conditions.append(MotherHealthRecord.record_type == record_type)
        if mother_id is not None:
            conditions.append(MotherHealthRecord.mother_id == mother_id)

        stmt = select(MotherHealthRecord)
        if conditions:
            stmt = stmt.where(and_(*conditions))
        return list(db.scalars(self._ordered(stmt)).all())

    def list_by_mother(self, db: Session, *, mother_id: int) -> List[MotherHealthRecord]:
        return self.get_filtered(db, mother_id=mother_id)

    def get_latest(self, db: Session, *, mother_id: int) -> Optional[MotherHealthRecord]:
        stmt = self._ordered(
            select(MotherHealthRecord).where(MotherHealthRecord.mother_id == mother_id)
        ).limit(1)
        return db.scalars(stmt).first()

    def get_health_trend(
        self, db: Session, *, mother_id: int, limit: int = 12
    ) -> List[MotherHealthRecord]:
        """The last `limit` records, returned oldest first for charting."""
        stmt = self._ordered(
            select(MotherHealthRecord).where(MotherHealthRecord.mother_id == mother_id)
        ).limit(limit)
        records = list(db.scalars(stmt).all())
        records.reverse()
        return records

    def get_upcoming_checkups(
        self,
        db: Session,
        *,
        days_ahead: int = 7,
        mother_id: Optional[int] = None,
        today: Optional[date] = None,
    ) -> List[MotherHealthRecord]:
        """Records whose next checkup falls within [today, today + days_ahead]."""
        start, end = upcoming_window(days_ahead, today)
        conditions = [
            MotherHealthRecord.next_checkup_date >= start,
            MotherHealthRecord.next_checkup_date <= end,
        ]
        if mother_id is not None:
            conditions.append(MotherHealthRecord.mother_id == mother_id)
        stmt = (
            select(MotherHealthRecord)
            .where(and_(*conditions))
            .order_by(MotherHealthRecord.next_checkup_date.asc(), MotherHealthRecord.id.asc())
        )
        return list(db.scalars(stmt).all())

    def get_statistics(self, db: Session) -> Dict[str, Dict[str, int]]:
        """Per record type: number of records and distinct mothers."""
        stmt = select(
            MotherHealthRecord.record_type,
            func.count(MotherHealthRecord.id),
            func.count(func.distinct(MotherHealthRecord.mother_id)),
        ).group_by(MotherHealthRecord.record_type)
        return {
            record_type: {"count": count, "unique_mothers": mothers}
            for record_type, count, mothers in db.execute(stmt).all()
        }


# Singleton instance
crud_mother_health_record = CRUDMotherHealthRecord(MotherHealthRecord)
