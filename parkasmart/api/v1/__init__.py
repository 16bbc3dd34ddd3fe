"""V1 API router aggregation."""

from fastapi import APIRouter

from parkasmart.api.v1.entries import router as entries_router
from parkasmart.api.v1.plates import router as plates_router
from parkasmart.api.v1.reports import router as reports_router
from parkasmart.api.v1.tenants import router as tenants_router
from parkasmart.api.v1.ussd import router as ussd_router

v1_router = APIRouter(prefix="/v1")
v1_router.include_router(tenants_router)
v1_router.include_router(entries_router)
v1_router.include_router(reports_router)
v1_router.include_router(plates_router)
v1_router.include_router(ussd_router)
