"""Login workflow scenarios."""

from .login_scenarios import empty_submission, invalid_password, run_scenario, valid_login

__all__ = [
    "valid_login",
    "invalid_password",
    "empty_submission",
    "run_scenario",
]
