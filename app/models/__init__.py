"""
SQLAlchemy Models for CHMS
"""

from ..database import Base
from .user import User
from .child import Child
from .health_record import HealthRecord
from .mother_health_record import MotherHealthRecord
from .immunization import Immunization
from .alert import Alert

# Export all models
__all__ = [
    "Base",
    "User",
    "Child",
    "HealthRecord",
    "MotherHealthRecord",
    "Immunization",
    "Alert",
]
