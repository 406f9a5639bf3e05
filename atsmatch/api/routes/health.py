"""
Health check endpoint for deployment monitoring.
"""
from fastapi import APIRouter, Depends

from atsmatch.api.dependencies import get_report_store
from atsmatch.core import config
from atsmatch.schemas.ats import HealthResponse
from atsmatch.services.report_service import ReportStore

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("", response_model=HealthResponse)
def health_check(store: ReportStore = Depends(get_report_store)):
    """
    Health check endpoint for deployment monitoring.
    
    Always returns 200; status is "degraded" while no report can be served.
    """
    available = store.is_available()
    return HealthResponse(
        status="healthy" if available else "degraded",
        report="available" if available else "missing",
        version=config.APP_VERSION,
    )
