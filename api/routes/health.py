"""Health check routes"""

from fastapi import APIRouter, Depends
import logging

from api.dependencies import get_mode_selector
from api.responses import HealthResponse
from services.mode_selector import ModeSelector

router = APIRouter(tags=["Health"])
logger = logging.getLogger("menufy.api.health")


@router.get("/health-check", response_model=HealthResponse)
def health_check(selector: ModeSelector = Depends(get_mode_selector)):
    """Basic health check endpoint; reports whether demo mode is active"""
    return HealthResponse(
        status="ok",
        service=selector.settings.app_name,
        version=selector.settings.app_version,
        mode=selector.mode.value,
    )
