"""
================================================================================
Package Pytest Configuration
================================================================================

Registers project markers and gates the live browser scenarios.

================================================================================
"""

import os

import pytest


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )
    config.addinivalue_line(
        "markers", "unit: Offline tests against the in-memory session"
    )
    config.addinivalue_line(
        "markers", "ui: Live browser tests (need --run-ui or RUN_UI_TESTS=1)"
    )

    # Feature markers
    config.addinivalue_line(
        "markers", "auth: Tests related to authentication"
    )


def pytest_collection_modifyitems(config, items):
    """
    Auto-mark tests by directory and skip live UI tests unless requested.
    """
    run_ui = config.getoption("--run-ui", default=False) or os.getenv(
        "RUN_UI_TESTS", ""
    ).lower() in ("1", "true", "yes")
    skip_ui = pytest.mark.skip(reason="live UI test: pass --run-ui or set RUN_UI_TESTS=1")

    for item in items:
        path = item.nodeid
        if path.startswith("login_regression/ui_testing/"):
            item.add_marker(pytest.mark.ui)
            if not run_ui:
                item.add_marker(skip_ui)
        elif path.startswith("login_regression/unit/"):
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Login Regression Harness",
        "=" * 60,
        "",
    ]
