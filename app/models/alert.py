from sqlalchemy import Column, Integer, String, Text, TIMESTAMP, ForeignKey, CheckConstraint, Index
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from ..database import Base


class Alert(Base):
    __tablename__ = "alerts"

    id = Column(Integer, primary_key=True, index=True)

    # Foreign Keys
    child_id = Column(Integer, ForeignKey("children.id", ondelete="CASCADE"), nullable=False, index=True)

    # Alert Content
    alert_type = Column(String(50), nullable=False, index=True)
    message = Column(Text, nullable=False)

    # Status: pending -> resolved, never back
    status = Column(String(20), nullable=False, default="pending", index=True)
    resolved_at = Column(TIMESTAMP)

    # Timestamps
    created_at = Column(TIMESTAMP, server_default=func.now(), index=True)

    # Constraints and Indexes
    __table_args__ = (
        CheckConstraint("status IN ('pending', 'resolved')", name="check_alert_status"),
        Index("ix_alerts_child_status", "child_id", "status", "created_at"),
    )

    # Relationships
    child = relationship("Child", back_populates="alerts")
