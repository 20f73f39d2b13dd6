"""CRUD operations for `Immunization` model."""

from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import Dict, List, Optional

from sqlalchemy import and_, func, select
from sqlalchemy.orm import Session, joinedload

from app.crud.base import CRUDBase
from app.models.child import Child
from app.models.immunization import Immunization
from app.schemas.immunization import ImmunizationCreate, ImmunizationUpdate
from app.services.immunization_schedule import upcoming_window


class CRUDImmunization(CRUDBase[Immunization, ImmunizationCreate, ImmunizationUpdate]):
    def list_by_child(self, db: Session, *, child_id: int) -> List[Immunization]:
        """Immunization history for a child, most recent dose first."""
        stmt = (
            select(Immunization)
            .where(Immunization.child_id == child_id)
            .order_by(Immunization.date_given.desc(), Immunization.id.desc())
        )
        return list(db.scalars(stmt).all())

    def get_history(self, db: Session, *, child_id: int) -> List[Immunization]:
        """Doses in the order they were given."""
        stmt = (
            select(Immunization)
            .where(Immunization.child_id == child_id)
            .order_by(Immunization.date_given.asc(), Immunization.id.asc())
        )
        return list(db.scalars(stmt).all())

    def vaccine_exists(self, db: Session, *, child_id: int, vaccine_name: str) -> bool:
        """Whether a child already has an entry naming this vaccine (case-insensitive)."""
        return self.count(
            db,
            [
                Immunization.child_id == child_id,
                func.lower(Immunization.vaccine_name).contains(vaccine_name.strip().lower()),
            ],
        ) > 0

    def get_vaccine_names_by_child(self, db: Session) -> Dict[int, List[str]]:
        """child id -> vaccine names, for children with any immunization."""
        names: Dict[int, List[str]] = defaultdict(list)
        for child_id, vaccine_name in db.execute(
            select(Immunization.child_id, Immunization.vaccine_name)
        ).all():
            names[child_id].append(vaccine_name)
        return dict(names)

    def _with_child(self, mother_id: Optional[int]):
        stmt = (
            select(Immunization)
            .join(Child, Immunization.child_id == Child.id)
            .options(joinedload(Immunization.child).joinedload(Child.mother))
        )
        if mother_id is not None:
            stmt = stmt.where(Child.mother_id == mother_id)
        return stmt

    def get_upcoming(
        self,
        db: Session,
        *,
        days_ahead: int = 30,
        mother_id: Optional[int] = None,
        today: Optional[date] = None,
    ) -> List[Immunization]:
        """Follow-ups due within [today, today + days_ahead], soonest first."""
        start, end = upcoming_window(days_ahead, today)
        stmt = (
            self._with_child(mother_id)
            .where(and_(Immunization.next_due_date >= start, Immunization.next_due_date <= end))
            .order_by(Immunization.next_due_date.asc(), Immunization.id.asc())
        )
        return list(db.scalars(stmt).unique().all())

    def get_overdue(
        self,
        db: Session,
        *,
        mother_id: Optional[int] = None,
        today: Optional[date] = None,
    ) -> List[Immunization]:
        """Follow-ups whose due date is strictly before today, oldest first."""
        today = today or date.today()
        stmt = (
            self._with_child(mother_id)
            .where(Immunization.next_due_date < today)
            .order_by(Immunization.next_due_date.asc(), Immunization.id.asc())
        )
        return list(db.scalars(stmt).unique().all())

    def get_statistics(self, db: Session, *, today: Optional[date] = None) -> Dict[str, int]:
        """Counts over immunizations that have a follow-up date."""
        today = today or date.today()
        start, end = upcoming_window(30, today)
        scheduled = Immunization.next_due_date.isnot(None)

        total, children = db.execute(
            select(
                func.count(Immunization.id),
                func.count(func.distinct(Immunization.child_id)),
            ).where(scheduled)
        ).one()
        return {
            "total_immunizations": total or 0,
            "children_immunized": children or 0,
            "overdue_count": self.count(db, [scheduled, Immunization.next_due_date < today]),
            "upcoming_count": self.count(
                db,
                [scheduled, Immunization.next_due_date >= start, Immunization.next_due_date <= end],
            ),
        }


# Singleton instance
crud_immunization = CRUDImmunization(Immunization)
