"""API v1 router aggregator."""

from fastapi import APIRouter

from app.api.v1.endpoints import (
    alerts,
    auth,
    children,
    dashboard,
    health_record,
    immunizations,
    mother_health_records,
    reports,
    users,
)

api_router = APIRouter(prefix="/api/v1")

api_router.include_router(auth.router)
api_router.include_router(users.router)
api_router.include_router(children.router)
api_router.include_router(health_record.router)
api_router.include_router(immunizations.router)
api_router.include_router(alerts.router)
api_router.include_router(mother_health_records.router)
api_router.include_router(reports.router)
api_router.include_router(dashboard.router)

__all__ = ["api_router"]
