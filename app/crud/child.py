"""CRUD operations for `Child` model."""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import and_, case, func, select
from sqlalchemy.orm import Session

from app.crud.base import CRUDBase
from app.models.child import Child
from app.models.health_record import HealthRecord
from app.schemas.child import ChildCreate, ChildUpdate
from app.utils.dates import calculate_age_in_months


class CRUDChild(CRUDBase[Child, ChildCreate, ChildUpdate]):
    def create_for_mother(self, db: Session, *, child_in: ChildCreate, mother_id: int) -> Child:
        """Create a child owned by the given mother (birth measurements are not columns)."""
        data = child_in.model_dump(include={"name", "dob", "gender"})
        return self._save(db, Child(mother_id=mother_id, **data))

    def list_children(self, db: Session, *, mother_id: Optional[int] = None) -> List[Child]:
        """All children, or one mother's children, newest first."""
        stmt = select(Child)
        if mother_id is not None:
            stmt = stmt.where(Child.mother_id == mother_id)
        stmt = stmt.order_by(Child.created_at.desc(), Child.id.desc())
        return list(db.scalars(stmt).all())

    def search(self, db: Session, *, term: str, mother_id: Optional[int] = None) -> List[Child]:
        """Children whose name contains the term, ordered by name."""
        conditions = [Child.name.ilike(f"%{term}%")]
        if mother_id is not None:
            conditions.append(Child.mother_id == mother_id)
        stmt = select(Child).where(and_(*conditions)).order_by(Child.name)
        return list(db.scalars(stmt).all())

    def is_owned_by_mother(self, db: Session, *, child_id: int, mother_id: int) -> bool:
        return self.count(db, [Child.id == child_id, Child.mother_id == mother_id]) > 0

    def get_with_latest_records(
        self, db: Session, *, mother_id: Optional[int] = None
    ) -> List[Tuple[Child, Optional[HealthRecord]]]:
        """Each child paired with its latest health record (or None).

        Latest is the greatest record_date; same-date records fall back to
        insertion order (greatest id).
        """
        ranked = select(
            HealthRecord.id.label("record_id"),
            func.row_number()
            .over(
                partition_by=HealthRecord.child_id,
                order_by=(HealthRecord.record_date.desc(), HealthRecord.id.desc()),
            )
            .label("rn"),
        ).subquery()
        latest_ids = select(ranked.c.record_id).where(ranked.c.rn == 1)

        stmt = select(Child, HealthRecord).outerjoin(
            HealthRecord,
            and_(HealthRecord.child_id == Child.id, HealthRecord.id.in_(latest_ids)),
        )
        if mother_id is not None:
            stmt = stmt.where(Child.mother_id == mother_id)
        stmt = stmt.order_by(Child.created_at.desc(), Child.id.desc())
        return [(child, record) for child, record in db.execute(stmt).all()]

    def get_statistics(
        self, db: Session, *, mother_id: Optional[int] = None, today: Optional[date] = None
    ) -> Dict[str, Any]:
        """Totals by gender and average age in months."""
        stmt = select(
            func.count(Child.id),
            func.sum(case((Child.gender == "male", 1), else_=0)),
            func.sum(case((Child.gender == "female", 1), else_=0)),
        )
        dob_stmt = select(Child.dob)
        if mother_id is not None:
            stmt = stmt.where(Child.mother_id == mother_id)
            dob_stmt = dob_stmt.where(Child.mother_id == mother_id)

        total, male, female = db.execute(stmt).one()
        ages = [calculate_age_in_months(dob, today) for dob in db.scalars(dob_stmt).all()]

        return {
            "total_children": total or 0,
            "male_count": male or 0,
            "female_count": female or 0,
            "avg_age_months": round(sum(ages) / len(ages), 1) if ages else None,
        }


# Singleton instance
crud_child = CRUDChild(Child)
