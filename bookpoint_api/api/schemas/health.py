"""Health check schemas."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class HealthState(str, Enum):
    OK = "ok"
    DEGRADED = "degraded"
    UNAVAILABLE = "unavailable"


class HealthStatus(BaseModel):
    """Health of the process at the moment it was computed."""

    state: HealthState = Field(..., description="ok / degraded / unavailable")
    timestamp: datetime = Field(..., description="상태 계산 시각 (UTC)")
    checks: dict[str, HealthState] = Field(default_factory=dict, description="의존성별 점검 결과")


class HealthResponse(BaseModel):
    """Response model for health checks."""

    status: HealthState = Field(..., description="ok / degraded / unavailable")
    timestamp: datetime | None = None
    degraded: bool | None = Field(None, description="degraded 상태일 때만 true")
    checks: dict[str, HealthState] | None = None

    @classmethod
    def from_status(cls, health: HealthStatus) -> "HealthResponse":
        return cls(
            status=health.state,
            timestamp=health.timestamp,
            degraded=True if health.state is HealthState.DEGRADED else None,
            checks=dict(health.checks) or None,
        )
