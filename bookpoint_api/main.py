import logging
from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bookpoint_api.api.router import api_router
from bookpoint_api.core.config import Settings, get_settings
from bookpoint_api.core.logging_utils import configure_logging
from bookpoint_api.services.health_service import HealthProbe, HealthService
from bookpoint_api.services.probes import Closer, build_dependency_probes

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    probes: Sequence[HealthProbe] | None = None,
) -> FastAPI:
    """
    Application factory.

    probes=None이면 설정(database_url, redis_url)으로부터 probe를 만들고,
    명시적으로 넘긴 경우(빈 리스트 포함) 그대로 사용합니다.
    """
    settings = settings or get_settings()

    closers: list[Closer] = []
    if probes is None:
        probes, closers = build_dependency_probes(settings)

    health_service = HealthService(probes, timeout=settings.health_check_timeout)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Starting BookPoint API (env=%s, probes=%s)",
            settings.app_env,
            [probe.name for probe in health_service.probes],
        )
        yield
        logger.info("Stopping BookPoint API")
        for close in closers:
            try:
                await close()
            except Exception as exc:
                logger.warning("Failed to close health probe resource (%s). Continuing shutdown.", exc)

    diagnostics = bool(settings.expose_diagnostics)
    app = FastAPI(
        title="BookPoint API",
        version="0.1.0",
        docs_url="/docs" if diagnostics else None,
        redoc_url="/redoc" if diagnostics else None,
        openapi_url="/openapi.json" if diagnostics else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.health_service = health_service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)
    return app


def start(settings: Settings | None = None) -> None:
    """Run the service with uvicorn until a termination signal arrives."""
    # .env 파일 로드 (Settings 생성 전에!)
    load_dotenv()
    settings = settings or get_settings()
    configure_logging(settings)
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        timeout_graceful_shutdown=settings.shutdown_timeout,
    )


def main() -> None:
    start()


if __name__ == "__main__":
    main()
