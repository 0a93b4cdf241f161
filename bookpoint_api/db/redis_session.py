import logging

import redis.asyncio as redis

from bookpoint_api.core.config import Settings

logger = logging.getLogger(__name__)


def create_redis_client(settings: Settings) -> redis.Redis | None:
    """
    Returns a Redis client instance, or None when REDIS_URL is not configured.
    """
    if not settings.redis_url:
        return None
    client = redis.from_url(
        settings.redis_url,
        encoding="utf-8",
        decode_responses=True,
        socket_connect_timeout=settings.health_check_timeout,
    )
    logger.info("Redis client initialized with %s", settings.redis_url)
    return client


async def ping_redis(client: redis.Redis) -> None:
    if not await client.ping():
        raise ConnectionError("Redis PING returned a falsy reply")
