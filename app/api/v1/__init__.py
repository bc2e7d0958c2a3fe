"""V1 API router aggregation."""

from fastapi import APIRouter

from app.api.v1.annotations import router as annotations_router
from app.api.v1.documents import router as documents_router
from app.api.v1.pages import router as pages_router
from app.api.v1.system import router as system_router

v1_router = APIRouter(prefix="/v1")
v1_router.include_router(documents_router)
v1_router.include_router(pages_router)
v1_router.include_router(annotations_router)
v1_router.include_router(system_router)
