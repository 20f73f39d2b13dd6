from sqlalchemy import Column, Integer, String, Date, Text, TIMESTAMP, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from ..database import Base


class Immunization(Base):
    __tablename__ = "immunizations"

    id = Column(Integer, primary_key=True, index=True)

    # Foreign Keys
    child_id = Column(Integer, ForeignKey("children.id", ondelete="CASCADE"), nullable=False, index=True)

    # Vaccine (free text, matched loosely against the canonical schedule)
    vaccine_name = Column(String(255), nullable=False)
    date_given = Column(Date, nullable=False, index=True)

    # Follow-up; NULL means a one-off dose with nothing scheduled
    next_due_date = Column(Date, index=True)

    notes = Column(Text)

    # Timestamps
    created_at = Column(TIMESTAMP, server_default=func.now())
    updated_at = Column(TIMESTAMP, server_default=func.now(), onupdate=func.now())

    # Relationships
    child = relationship("Child", back_populates="immunizations")
