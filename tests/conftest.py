"""
Pytest configuration and fixtures for fieldcheck tests
"""
from dataclasses import dataclass, field

import pytest
from hypothesis import HealthCheck, settings

from fieldcheck.config import reset_settings


# =======================
# PYTEST CONFIGURATION
# =======================

# clean_settings is autouse and function scoped; it only touches settings
# state that property tests never change.
settings.register_profile(
    "fieldcheck", suppress_health_check=[HealthCheck.function_scoped_fixture]
)
settings.load_profile("fieldcheck")


def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that don't require external services"
    )


# =======================
# CONFIGURATION FIXTURES
# =======================

@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """
    Run every test against default settings

    Clears FIELDCHECK_* environment variables and the cached settings.
    """
    for name in (
        "FIELDCHECK_LOG_LEVEL",
        "FIELDCHECK_LOG_FORMAT",
        "FIELDCHECK_METRICS_ENABLED",
        "FIELDCHECK_DATE_LAYOUT",
    ):
        monkeypatch.delenv(name, raising=False)

    reset_settings()
    yield
    reset_settings()


# =======================
# DOMAIN FIXTURES
# =======================

@dataclass
class Customer:
    name: str = ""
    email: str = ""
    age: int = 0
    tags: list = field(default_factory=list)
    nickname: str | None = None


@pytest.fixture
def customer() -> Customer:
    """A customer that passes the usual rules"""
    return Customer(name="Ada", email="ada@example.com", age=36, tags=["vip"])


@pytest.fixture
def customer_cls():
    return Customer
