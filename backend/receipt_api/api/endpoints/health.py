"""Health check endpoint for monitoring."""
from fastapi import APIRouter

from receipt_api.models.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.api_route("/health", methods=["GET", "HEAD"], response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint (supports GET & HEAD)."""
    return HealthResponse(status="ok")
