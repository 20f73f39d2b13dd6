"""Alert endpoints."""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session

from app.api.deps import (
    get_accessible_child,
    get_current_active_user,
    get_db,
    mother_scope,
    require_role,
)
from app.config import settings
from app.core.exceptions import AlertNotFoundException, ChildNotFoundException
from app.crud import crud_alert, crud_child
from app.models.user import User
from app.schemas.alert import (
    AlertCreate,
    AlertPurgeResponse,
    AlertResolveResponse,
    AlertResponse,
    AlertWithChild,
)
from app.services.health_monitoring import health_monitoring_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/alerts",
    tags=["Alerts"],
)


@router.get(
    "",
    response_model=List[AlertWithChild],
    status_code=status.HTTP_200_OK,
    summary="List alerts",
    description="Newest first. Mothers see alerts of their own children only.",
)
def list_alerts(
    status_filter: Optional[str] = Query(None, alias="status", pattern="^(pending|resolved)$"),
    child_id: Optional[int] = Query(None, description="Only alerts of this child"),
    current_user: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
) -> List[AlertWithChild]:
    if child_id is not None:
        get_accessible_child(db, child_id, current_user)

    alerts = crud_alert.get_filtered(
        db,
        status=status_filter,
        child_id=child_id,
        mother_id=mother_scope(current_user),
    )
    return [AlertWithChild.from_alert(alert) for alert in alerts]


@router.post(
    "",
    response_model=AlertResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a manual alert",
    description="**Access:** Doctors only. The alert starts as pending.",
)
def create_alert(
    alert_in: AlertCreate,
    current_user: User = Depends(require_role("doctor")),
    db: Session = Depends(get_db),
) -> AlertResponse:
    if not crud_child.get(db, alert_in.child_id):
        raise ChildNotFoundException()

    alert = crud_alert.create_alert(
        db,
        child_id=alert_in.child_id,
        alert_type=alert_in.alert_type,
        message=alert_in.message,
    )
    return AlertResponse.model_validate(alert)


@router.post(
    "/purge-resolved",
    response_model=AlertPurgeResponse,
    status_code=status.HTTP_200_OK,
    summary="Delete old resolved alerts",
    description="Removes resolved alerts created more than `days` days ago. Pending alerts are kept.",
)
def purge_resolved_alerts(
    days: int = Query(settings.ALERT_RETENTION_DAYS, ge=0, description="Retention window in days"),
    current_user: User = Depends(require_role("doctor")),
    db: Session = Depends(get_db),
) -> AlertPurgeResponse:
    deleted = health_monitoring_service.purge_resolved_alerts(db, days_old=days)
    return AlertPurgeResponse(deleted=deleted, retention_days=days)


@router.post(
    "/{alert_id}/resolve",
    response_model=AlertResolveResponse,
    status_code=status.HTTP_200_OK,
    summary="Resolve an alert",
    description="""
    Marks a pending alert as resolved. Resolving an already resolved alert
    changes nothing and returns `changed: false`.

    **Access:** Doctors only
    """,
)
def resolve_alert(
    alert_id: int = Path(..., description="Alert ID"),
    current_user: User = Depends(require_role("doctor")),
    db: Session = Depends(get_db),
) -> AlertResolveResponse:
    if not crud_alert.get(db, alert_id):
        raise AlertNotFoundException()

    changed = crud_alert.resolve(db, alert_id=alert_id)
    alert = crud_alert.get(db, alert_id)
    return AlertResolveResponse(alert=AlertResponse.model_validate(alert), changed=changed)


@router.delete(
    "/{alert_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an alert",
    description="**Access:** Doctors only",
)
def delete_alert(
    alert_id: int = Path(..., description="Alert ID"),
    current_user: User = Depends(require_role("doctor")),
    db: Session = Depends(get_db),
) -> None:
    if not crud_alert.delete(db, id=alert_id):
        raise AlertNotFoundException()
    logger.info(f"[ALERT] Deleted alert {alert_id}")
