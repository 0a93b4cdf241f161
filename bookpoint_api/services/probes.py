"""Dependency probes built from settings."""

import logging
from collections.abc import Awaitable, Callable
from functools import partial

from bookpoint_api.core.config import Settings
from bookpoint_api.db.redis_session import create_redis_client, ping_redis
from bookpoint_api.db.session import create_engine, ping_database
from bookpoint_api.services.health_service import HealthProbe

logger = logging.getLogger(__name__)

Closer = Callable[[], Awaitable[None]]


def build_dependency_probes(settings: Settings) -> tuple[list[HealthProbe], list[Closer]]:
    """
    설정된 의존성에 대한 probe 생성

    Returns:
        (probes, closers) - closers는 종료 시 호출해 연결을 정리합니다.
    """
    probes: list[HealthProbe] = []
    closers: list[Closer] = []

    engine = create_engine(settings)
    if engine is not None:
        probes.append(
            HealthProbe(
                name="database",
                check=partial(ping_database, engine),
                critical=settings.database_critical,
            )
        )
        closers.append(engine.dispose)

    redis_client = create_redis_client(settings)
    if redis_client is not None:
        probes.append(
            HealthProbe(
                name="redis",
                check=partial(ping_redis, redis_client),
                critical=settings.redis_critical,
            )
        )
        closers.append(redis_client.aclose)

    if not probes:
        logger.info("No dependency probes configured; health is process liveness only.")
    return probes, closers
