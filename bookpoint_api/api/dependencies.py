"""API 의존성"""

from fastapi import Request

from bookpoint_api.services.health_service import HealthService


def get_health_service(request: Request) -> HealthService:
    """Return the HealthService built by create_app()."""
    return request.app.state.health_service
