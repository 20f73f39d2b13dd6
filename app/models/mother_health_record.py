from sqlalchemy import Column, Integer, String, Float, Date, Text, TIMESTAMP, ForeignKey, CheckConstraint
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from ..database import Base


class MotherHealthRecord(Base):
    __tablename__ = "mother_health_records"

    id = Column(Integer, primary_key=True, index=True)

    # Foreign Keys
    mother_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    # Checkup Info
    record_type = Column(String(20), nullable=False, default="general", index=True)
    record_date = Column(Date, nullable=False, index=True)

    # Vital Signs
    weight = Column(Float)  # kg
    blood_pressure = Column(String(10))  # "systolic/diastolic"
    hemoglobin = Column(Float)  # g/dL
    blood_sugar = Column(Float)  # mg/dL

    # Prenatal
    pregnancy_week = Column(Integer)

    # Postnatal
    delivery_date = Column(Date)
    delivery_type = Column(String(20))

    # Clinical Notes
    complications = Column(Text)
    medications = Column(Text)
    doctor_notes = Column(Text)

    # Follow-up
    next_checkup_date = Column(Date, index=True)

    # Timestamps
    created_at = Column(TIMESTAMP, server_default=func.now())
    updated_at = Column(TIMESTAMP, server_default=func.now(), onupdate=func.now())

    # Constraints
    __table_args__ = (
        CheckConstraint("record_type IN ('general', 'prenatal', 'postnatal')", name="check_record_type"),
        CheckConstraint("delivery_type IN ('normal', 'cesarean', 'assisted')", name="check_delivery_type"),
    )

    # Relationships
    mother = relationship("User", foreign_keys=[mother_id])
