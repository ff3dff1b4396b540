"""V1 API router: aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from exportdesk.presentation.api.v1.endpoints.health import router as health_router
from exportdesk.presentation.api.v1.endpoints.notifications import router as notifications_router
from exportdesk.presentation.api.v1.endpoints.reports import router as reports_router
from exportdesk.presentation.api.v1.endpoints.screens import router as screens_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(screens_router)
router.include_router(reports_router)
router.include_router(notifications_router)
