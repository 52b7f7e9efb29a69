from fastapi import APIRouter

from tacea_kpis.api.routes import dashboard, reports

api_router = APIRouter()
api_router.include_router(dashboard.router)
api_router.include_router(reports.router)
