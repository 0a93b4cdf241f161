from fastapi import APIRouter, Depends, Response, status

from bookpoint_api.api.dependencies import get_health_service
from bookpoint_api.api.schemas.health import HealthResponse, HealthState
from bookpoint_api.services.health_service import HealthService

HEALTH_PATH = "/health"

_STATUS_CODES = {
    HealthState.OK: status.HTTP_200_OK,
    HealthState.DEGRADED: status.HTTP_200_OK,
    HealthState.UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
}

router = APIRouter()


def http_status_for(state: HealthState) -> int:
    return _STATUS_CODES[state]


@router.get(
    HEALTH_PATH,
    name="Health",
    response_model=HealthResponse,
    response_model_exclude_none=True,
    summary="Service health check",
    responses={503: {"model": HealthResponse, "description": "Service unavailable"}},
)
async def health_check(
    response: Response,
    service: HealthService = Depends(get_health_service),
) -> HealthResponse:
    """Report whether the process can serve traffic. Degraded stays 200; unavailable is 503."""
    health = await service.check()
    response.status_code = http_status_for(health.state)
    return HealthResponse.from_status(health)
