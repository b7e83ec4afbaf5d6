"""Top-level API router — aggregates all endpoint routers under /api."""

from fastapi import APIRouter

from docarchive.presentation.api.endpoints.health import router as health_router
from docarchive.presentation.api.endpoints.clients import router as clients_router
from docarchive.presentation.api.endpoints.templates import router as templates_router
from docarchive.presentation.api.endpoints.documents import router as documents_router
from docarchive.presentation.api.endpoints.archive import router as archive_router
from docarchive.presentation.api.endpoints.reports import router as reports_router

router = APIRouter(prefix="/api")
router.include_router(health_router)
router.include_router(clients_router)
router.include_router(templates_router)
router.include_router(documents_router)
router.include_router(archive_router)
router.include_router(reports_router)
