from collections.abc import Callable, Iterator

import pytest
from fastapi.testclient import TestClient

from bookpoint_api.core.config import Settings
from bookpoint_api.main import create_app
from bookpoint_api.services.health_service import HealthProbe


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the developer's .env file."""
    return Settings(_env_file=None, app_env="test", health_check_timeout=0.2)


@pytest.fixture
def make_client(settings: Settings) -> Iterator[Callable[..., TestClient]]:
    """Build a TestClient around an app wired with the given probes."""
    clients: list[TestClient] = []

    def _make(probes: list[HealthProbe] | None = None, **overrides) -> TestClient:
        app_settings = settings.model_copy(update=overrides) if overrides else settings
        client = TestClient(create_app(app_settings, probes=probes or []))
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)
