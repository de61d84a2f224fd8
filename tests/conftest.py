"""Global pytest configuration."""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import AsyncGenerator
from datetime import datetime, timezone

import pytest

CONFIG_ENV_VARS = ("TRUSTLENS_LOG_LEVEL", "RDAP_ENABLED", "RDAP_TIMEOUT", "CONFIG_DIR")


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep a developer's .env or heuristics.yaml out of test runs."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("CONFIG_DIR", str(tmp_path / "config"))
    monkeypatch.setattr("trustlens.config.load_dotenv", lambda *args, **kwargs: False)


@pytest.fixture
def now() -> datetime:
    """Fixed evaluation time shared by tests."""
    return datetime(2024, 6, 1, tzinfo=timezone.utc)


@pytest.fixture(scope="session")
def event_loop() -> AsyncGenerator[asyncio.AbstractEventLoop, None]:
    """Provide a shared event loop for async tests and fixtures."""

    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    try:
        yield loop
    finally:
        loop.close()


@pytest.hookimpl(tryfirst=True)
def pytest_pyfunc_call(pyfuncitem):  # type: ignore[override]
    if inspect.iscoroutinefunction(pyfuncitem.obj):
        testargs = {
            name: pyfuncitem.funcargs[name] for name in pyfuncitem._fixtureinfo.argnames
        }
        loop = testargs.get("event_loop") or asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
        loop.run_until_complete(pyfuncitem.obj(**testargs))
        return True
    return None


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "asyncio: mark test as requiring asyncio support")
