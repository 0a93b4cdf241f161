"""API schemas package"""

from bookpoint_api.api.schemas.health import HealthResponse, HealthState, HealthStatus

__all__ = [
    "HealthResponse",
    "HealthState",
    "HealthStatus",
]
