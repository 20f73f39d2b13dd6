"""CRUD operations for `User` model."""

from __future__ import annotations

from typing import Dict, List, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.core.security import get_password_hash, verify_password
from app.crud.base import CRUDBase
from app.models.child import Child
from app.models.mother_health_record import MotherHealthRecord
from app.models.user import User
from app.schemas.user import UserCreate, UserUpdate


class CRUDUser(CRUDBase[User, UserCreate, UserUpdate]):
    def get_by_email(self, db: Session, email: Optional[str]) -> Optional[User]:
        if not email:
            return None
        stmt = select(User).where(User.email == email.strip().lower()).limit(1)
        return db.scalars(stmt).first()

    def email_exists(self, db: Session, email: str, exclude_user_id: Optional[int] = None) -> bool:
        conditions = [User.email == email.strip().lower()]
        if exclude_user_id is not None:
            conditions.append(User.id != exclude_user_id)
        return self.count(db, conditions) > 0

    def create_user(self, db: Session, *, user_in: UserCreate) -> User:
        user_data = user_in.model_dump(exclude={"password", "confirm_password"})
        user_data["password_hash"] = get_password_hash(user_in.password)
        return self._save(db, User(**user_data))

    def authenticate(self, db: Session, *, email: str, password: str) -> Optional[User]:
        user = self.get_by_email(db, email)
        if not user:
            return None
        if not verify_password(password, user.password_hash):
            return None
        return user

    def update_password(self, db: Session, *, user_id: int, new_password: str) -> Optional[User]:
        user = self.get(db, user_id)
        if not user:
            return None
        user.password_hash = get_password_hash(new_password)
        return self._save(db, user)

    def get_by_role(self, db: Session, *, role: str) -> List[User]:
        stmt = select(User).where(User.role == role).order_by(User.name)
        return list(db.scalars(stmt).all())

    def get_mother(self, db: Session, mother_id: int) -> Optional[User]:
        """Get a user only if it exists and has the mother role."""
        user = self.get(db, mother_id)
        if user is None or user.role != "mother":
            return None
        return user

    def get_mothers_with_counts(self, db: Session) -> List[tuple]:
        """Mothers with their number of children and maternal records."""
        children_count = (
            select(func.count(Child.id)).where(Child.mother_id == User.id).scalar_subquery()
        )
        records_count = (
            select(func.count(MotherHealthRecord.id))
            .where(MotherHealthRecord.mother_id == User.id)
            .scalar_subquery()
        )
        stmt = (
            select(User, children_count, records_count)
            .where(User.role == "mother")
            .order_by(User.name)
        )
        return [tuple(row) for row in db.execute(stmt).all()]

    def get_statistics(self, db: Session) -> Dict[str, int]:
        """User count per role."""
        stmt = select(User.role, func.count(User.id)).group_by(User.role)
        return {role: count for role, count in db.execute(stmt).all()}


# Singleton instance
crud_user = CRUDUser(User)
