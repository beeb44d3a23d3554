"""
Pytest configuration and fixtures for surrogate tests.

This module provides:
- Settings isolation between tests
- A fixed instant and frozen clock for timestamping writers
- Account, writer and counting-factory test doubles
- Remote servers bound to ephemeral ports
- FastAPI test clients
"""

from datetime import datetime
from pathlib import Path

import pytest
import pytz
from fastapi.testclient import TestClient

from surrogate.config.settings import Settings, reset_settings, set_settings
from surrogate.core.timezone import Clock, frozen_clock
from surrogate.domain.models import BankAccount, MathService, SimpleWriter
from surrogate.main import create_app
from surrogate.remote import RemoteServer


# =============================================================================
# SETTINGS FIXTURES
# =============================================================================


@pytest.fixture(autouse=True)
def clean_settings():
    """Start and finish every test with freshly loaded settings."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def test_settings() -> Settings:
    """Settings suitable for servers started during tests."""
    settings = Settings(
        log_level="WARNING",
        remote_host="127.0.0.1",
        remote_port=0,
        remote_timeout_seconds=2.0,
        startup_timeout_seconds=5.0,
        caller_identity=None,
        timestamp_format=None,
        frozen_time=None,
    )
    set_settings(settings)
    return settings


# =============================================================================
# TIME HELPERS
# =============================================================================


PACIFIC_OFFSET = pytz.FixedOffset(-8 * 60)


@pytest.fixture
def fixed_now() -> datetime:
    """Fixed 'now' timestamp for deterministic tests."""
    return datetime(2017, 12, 1, 0, 0, 0, tzinfo=PACIFIC_OFFSET)


@pytest.fixture
def fixed_clock(fixed_now) -> Clock:
    """Clock frozen at fixed_now."""
    return frozen_clock(fixed_now)


# =============================================================================
# SUBJECT FIXTURES
# =============================================================================


@pytest.fixture
def account() -> BankAccount:
    """Provide an account holding 100."""
    return BankAccount(100)


class CountingAccountFactory:
    """Account factory that records how often it was called."""

    def __init__(self):
        self.calls = 0
        self.created: list[BankAccount] = []

    def __call__(self, starting_balance: int) -> BankAccount:
        self.calls += 1
        account = BankAccount(starting_balance)
        self.created.append(account)
        return account


@pytest.fixture
def account_factory() -> CountingAccountFactory:
    """Provide a counting account factory."""
    return CountingAccountFactory()


def read_lines(path: Path) -> list[str]:
    """Return the lines stored at path, newlines included."""
    with open(path, encoding="utf-8") as f:
        return f.readlines()


@pytest.fixture
def writer_path(tmp_path) -> Path:
    """Path of the file a test writer writes to."""
    return tmp_path / "final.txt"


@pytest.fixture
def simple_writer(writer_path):
    """Provide a SimpleWriter, closed at teardown if the test left it open."""
    writer = SimpleWriter(writer_path)
    yield writer
    if not writer.closed:
        writer.close()


# =============================================================================
# REMOTE FIXTURES
# =============================================================================


@pytest.fixture
def math_server(test_settings):
    """Serve a MathService on an ephemeral port."""
    server = RemoteServer(MathService(), test_settings)
    server.start(port=0)
    yield server
    server.stop()


@pytest.fixture
def account_server(test_settings):
    """Serve an account holding 100 on an ephemeral port; yields (server, account)."""
    real_account = BankAccount(100)
    server = RemoteServer(real_account, test_settings)
    server.start(port=0)
    yield server, real_account
    server.stop()


@pytest.fixture
def client(account) -> TestClient:
    """Test client for an app serving the `account` fixture."""
    return TestClient(create_app(account))


@pytest.fixture
def math_client() -> TestClient:
    """Test client for an app serving a MathService."""
    return TestClient(create_app(MathService()))
