"""Services package - 상태 점검 로직"""

from bookpoint_api.services.health_service import HealthProbe, HealthService

__all__ = [
    "HealthProbe",
    "HealthService",
]
