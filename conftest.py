"""
Repository-level pytest configuration.

  - Demo-safe environment defaults (no real credentials embedded)
  - ``--run-ui`` switch for the live browser scenarios
  - Loguru initialized once per test session
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator

import pytest

from login_regression.ui_testing.framework.log_config import init_logger


def pytest_addoption(parser):
    parser.addoption(
        "--run-ui",
        action="store_true",
        default=False,
        help="Run live browser scenarios against UI_BASE_URL",
    )


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _demo_safe_env_defaults() -> Generator[None, None, None]:
    """Set demo-safe environment defaults if not already provided by the user/CI."""
    defaults = {
        "UI_BASE_URL": "http://localhost:3000",
        "UI_USERNAME": "testuser@example.com",
        "UI_PASSWORD": "ValidPass123!",
    }

    for k, v in defaults.items():
        os.environ.setdefault(k, v)

    init_logger()
    yield
