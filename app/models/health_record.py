from sqlalchemy import Column, Integer, String, Float, Date, Text, TIMESTAMP, ForeignKey, CheckConstraint, Index
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from ..database import Base
from ..services.growth import calculate_bmi


class HealthRecord(Base):
    __tablename__ = "health_records"

    id = Column(Integer, primary_key=True, index=True)

    # Foreign Keys
    child_id = Column(Integer, ForeignKey("children.id", ondelete="CASCADE"), nullable=False, index=True)

    # Measurements
    weight = Column(Float, nullable=False)  # kg
    height = Column(Float, nullable=False)  # m
    nutrition_status = Column(String(20), nullable=False, index=True)

    # Notes
    vaccinations = Column(Text)
    doctor_notes = Column(Text)

    # Several records per child per day are allowed
    record_date = Column(Date, nullable=False, index=True)

    # Timestamps
    created_at = Column(TIMESTAMP, server_default=func.now())
    updated_at = Column(TIMESTAMP, server_default=func.now(), onupdate=func.now())

    # Constraints
    __table_args__ = (
        CheckConstraint(
            "nutrition_status IN ('Underweight', 'Normal', 'Overweight', 'Obese')",
            name="check_nutrition_status",
        ),
        Index("ix_health_records_child_date", "child_id", "record_date"),
    )

    # Relationships
    child = relationship("Child", back_populates="health_records")

    @property
    def bmi(self) -> float:
        return calculate_bmi(self.weight or 0, self.height or 0)
