"""CRUD operations package - exports singleton instances for all models."""

from .base import CRUDBase
from .user import crud_user
from .child import crud_child
from .health_record import crud_health_record
from .mother_health_record import crud_mother_health_record
from .immunization import crud_immunization
from .alert import crud_alert


__all__ = [
    # Base
    "CRUDBase",
    # CRUD instances
    "crud_user",
    "crud_child",
    "crud_health_record",
    "crud_mother_health_record",
    "crud_immunization",
    "crud_alert",
]
