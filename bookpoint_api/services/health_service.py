"""서비스 상태 점검 (liveness / readiness)"""

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

from bookpoint_api.api.schemas.health import HealthState, HealthStatus

logger = logging.getLogger(__name__)

DEFAULT_PROBE_TIMEOUT = 2.0


@dataclass(frozen=True)
class HealthProbe:
    """A named dependency check. The check passes if it returns without raising."""

    name: str
    check: Callable[[], Awaitable[Any]]
    critical: bool = False


def aggregate_state(failed: list[HealthProbe], total: int) -> HealthState:
    """
    점검 결과 집계

    - 실패 없음 → ok
    - 전부 실패, 또는 critical 의존성 실패 → unavailable
    - 그 외 일부 실패 → degraded
    """
    if not failed:
        return HealthState.OK
    if len(failed) >= total or any(probe.critical for probe in failed):
        return HealthState.UNAVAILABLE
    return HealthState.DEGRADED


class HealthService:
    """Answers whether this process is able to serve traffic."""

    def __init__(
        self,
        probes: Iterable[HealthProbe] = (),
        timeout: float = DEFAULT_PROBE_TIMEOUT,
    ) -> None:
        if timeout <= 0:
            raise ValueError("timeout must be positive")

        self._probes = tuple(probes)
        names = [probe.name for probe in self._probes]
        if len(set(names)) != len(names):
            raise ValueError(f"duplicate probe names: {names}")

        self._timeout = timeout
        # Anchors are captured once; now() only reads them.
        self._wall_anchor = datetime.now(timezone.utc)
        self._monotonic_anchor = time.monotonic()

    @property
    def probes(self) -> tuple[HealthProbe, ...]:
        return self._probes

    def now(self) -> datetime:
        """UTC wall time derived from the monotonic clock, so it never goes backwards."""
        elapsed = time.monotonic() - self._monotonic_anchor
        return self._wall_anchor + timedelta(seconds=elapsed)

    def get_health(self) -> HealthStatus:
        """Return an ``ok`` status without touching any dependency."""
        return HealthStatus(state=HealthState.OK, timestamp=self.now())

    async def check(self, timeout: float | None = None) -> HealthStatus:
        """
        의존성 점검 포함 상태 조회

        모든 probe를 동시에 실행하고, 각 probe는 timeout 안에 끝나야 합니다.
        실패나 timeout은 예외로 올리지 않고 unavailable 로 기록합니다.
        """
        if not self._probes:
            return self.get_health()

        limit = self._timeout if timeout is None else timeout
        states = await asyncio.gather(*(self._run_probe(probe, limit) for probe in self._probes))

        checks = {probe.name: state for probe, state in zip(self._probes, states)}
        failed = [probe for probe, state in zip(self._probes, states) if state is not HealthState.OK]

        return HealthStatus(
            state=aggregate_state(failed, len(self._probes)),
            timestamp=self.now(),
            checks=checks,
        )

    async def _run_probe(self, probe: HealthProbe, timeout: float) -> HealthState:
        try:
            await asyncio.wait_for(probe.check(), timeout=timeout)
        except asyncio.TimeoutError:
            logger.warning("Health probe '%s' timed out after %.2fs", probe.name, timeout)
            return HealthState.UNAVAILABLE
        except Exception as exc:
            logger.warning("Health probe '%s' failed: %s", probe.name, exc)
            return HealthState.UNAVAILABLE
        return HealthState.OK
