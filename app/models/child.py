from sqlalchemy import Column, Integer, String, Date, TIMESTAMP, ForeignKey, CheckConstraint
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from ..database import Base


class Child(Base):
    __tablename__ = "children"

    id = Column(Integer, primary_key=True, index=True)

    # Foreign Keys
    mother_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    # Profile (age is always derived from dob, never stored)
    name = Column(String(255), nullable=False, index=True)
    dob = Column(Date, nullable=False)
    gender = Column(String(10), nullable=False)

    # Timestamps
    created_at = Column(TIMESTAMP, server_default=func.now())
    updated_at = Column(TIMESTAMP, server_default=func.now(), onupdate=func.now())

    # Constraints
    __table_args__ = (
        CheckConstraint("gender IN ('male', 'female')", name="check_child_gender"),
    )

    # Relationships
    mother = relationship("User", back_populates="children", foreign_keys=[mother_id])
    health_records = relationship("HealthRecord", back_populates="child", cascade="all, delete-orphan")
    immunizations = relationship("Immunization", back_populates="child", cascade="all, delete-orphan")
    alerts = relationship("Alert", back_populates="child", cascade="all, delete-orphan")
