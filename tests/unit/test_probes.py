"""의존성 probe 테스트"""

from contextlib import asynccontextmanager

import pytest
from fastapi.testclient import TestClient

from bookpoint_api.db.redis_session import ping_redis
from bookpoint_api.db.session import ping_database
from bookpoint_api.main import create_app
from bookpoint_api.services.probes import build_dependency_probes


class FakeConnection:
    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.statements: list[str] = []

    async def execute(self, statement):
        if self.fail:
            raise ConnectionError("database is down")
        self.statements.append(str(statement))


class FakeEngine:
    def __init__(self, fail: bool = False) -> None:
        self.connection = FakeConnection(fail)

    @asynccontextmanager
    async def connect(self):
        yield self.connection


class FakeRedis:
    def __init__(self, reply) -> None:
        self.reply = reply

    async def ping(self):
        return self.reply


@pytest.mark.asyncio
async def test_ping_database_runs_select_one():
    engine = FakeEngine()
    await ping_database(engine)

    assert engine.connection.statements == ["SELECT 1"]


@pytest.mark.asyncio
async def test_ping_database_propagates_failure():
    with pytest.raises(ConnectionError):
        await ping_database(FakeEngine(fail=True))


@pytest.mark.asyncio
async def test_ping_redis():
    await ping_redis(FakeRedis(True))
    with pytest.raises(ConnectionError):
        await ping_redis(FakeRedis(False))


def test_no_urls_means_no_probes(settings):
    probes, closers = build_dependency_probes(settings)

    assert probes == []
    assert closers == []


@pytest.mark.asyncio
async def test_redis_url_builds_redis_probe(settings):
    redis_settings = settings.model_copy(update={"redis_url": "redis://localhost:6379/0"})
    probes, closers = build_dependency_probes(redis_settings)

    assert [probe.name for probe in probes] == ["redis"]
    assert probes[0].critical is False
    assert len(closers) == 1
    for close in closers:
        await close()


def test_lifespan_runs_closers(settings, monkeypatch):
    closed: list[str] = []

    async def close() -> None:
        closed.append("redis")

    monkeypatch.setattr(
        "bookpoint_api.main.build_dependency_probes",
        lambda _settings: ([], [close]),
    )

    with TestClient(create_app(settings)) as client:
        assert client.get("/health").status_code == 200
        assert closed == []

    assert closed == ["redis"]


def test_lifespan_keeps_closing_after_a_failure(settings, monkeypatch, caplog):
    closed: list[str] = []

    async def broken_dispose() -> None:
        raise ConnectionError("engine dispose failed")

    async def close_redis() -> None:
        closed.append("redis")

    monkeypatch.setattr(
        "bookpoint_api.main.build_dependency_probes",
        lambda _settings: ([], [broken_dispose, close_redis]),
    )

    with caplog.at_level("WARNING", logger="bookpoint_api.main"):
        with TestClient(create_app(settings)) as client:
            assert client.get("/health").status_code == 200

    assert closed == ["redis"]
    assert "engine dispose failed" in caplog.text


class DisposableEngine(FakeEngine):
    def __init__(self) -> None:
        super().__init__()
        self.disposed = False

    async def dispose(self) -> None:
        self.disposed = True


@pytest.mark.asyncio
async def test_database_url_builds_database_probe(settings, monkeypatch):
    engine = DisposableEngine()
    monkeypatch.setattr("bookpoint_api.services.probes.create_engine", lambda _settings: engine)
    db_settings = settings.model_copy(update={"database_url": "mysql+asyncmy://u:p@db:3306/bookpoint"})

    probes, closers = build_dependency_probes(db_settings)

    assert [probe.name for probe in probes] == ["database"]
    assert probes[0].critical is True
    assert len(closers) == 1

    await probes[0].check()
    assert engine.connection.statements == ["SELECT 1"]

    await closers[0]()
    assert engine.disposed is True


def test_database_critical_flag_is_respected(settings, monkeypatch):
    monkeypatch.setattr("bookpoint_api.services.probes.create_engine", lambda _settings: DisposableEngine())
    db_settings = settings.model_copy(
        update={"database_url": "mysql+asyncmy://u:p@db:3306/bookpoint", "database_critical": False}
    )

    probes, _closers = build_dependency_probes(db_settings)

    assert probes[0].critical is False
