from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from bookpoint_api.core.config import Settings


def create_engine(settings: Settings) -> AsyncEngine | None:
    """Build the async engine used for reachability checks, if a database is configured."""
    if not settings.database_url:
        return None
    return create_async_engine(
        str(settings.database_url),
        echo=settings.database_echo,
        pool_pre_ping=True,  # 연결 사용 전 유효성 검사
        pool_size=1,
        max_overflow=0,
        pool_recycle=3600,  # 1시간마다 연결 재생성
    )


async def ping_database(engine: AsyncEngine) -> None:
    async with engine.connect() as connection:
        await connection.execute(text("SELECT 1"))
