"""Test session environment, applied before any test module imports gamelink.config."""
from __future__ import annotations

import pytest

TEST_ENV = {
    "POSTGRES_USER": "gamelink",
    "POSTGRES_PASSWORD": "gamelink",
    "POSTGRES_DB": "gamelink_test",
    "JWT_SECRET": "test-secret-with-at-least-32-bytes-of-entropy",
    "JWT_VERIFY_MODE": "hs256",
}

_env_patch = pytest.MonkeyPatch()


def pytest_configure(config: pytest.Config) -> None:
    for key, value in TEST_ENV.items():
        _env_patch.setenv(key, value)


def pytest_unconfigure(config: pytest.Config) -> None:
    _env_patch.undo()
