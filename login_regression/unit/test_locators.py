from dataclasses import FrozenInstanceError

import pytest

from login_regression.ui_testing.framework.exceptions import ConfigurationError
from login_regression.ui_testing.framework.locators import By, Locator, LocatorRegistry
from login_regression.ui_testing.pages.login_page import LoginPage


def test_resolve_returns_registered_locator():
    registry = LocatorRegistry({"email": Locator(By.ID, "email")})
    assert registry.resolve("email") == Locator(By.ID, "email")


def test_resolve_is_idempotent():
    registry = LocatorRegistry({"submit": Locator(By.CSS, "button[type=submit]")})
    assert registry.resolve("submit") == registry.resolve("submit")
    assert hash(registry.resolve("submit")) == hash(Locator(By.CSS, "button[type=submit]"))


def test_unknown_name_lists_registered_names():
    registry = LocatorRegistry({"email": Locator(By.ID, "email")})

    with pytest.raises(ConfigurationError) as exc_info:
        registry.resolve("username")

    assert "username" in str(exc_info.value)
    assert "email" in str(exc_info.value)


def test_registry_is_isolated_from_source_mapping():
    source = {"email": Locator(By.ID, "email")}
    registry = LocatorRegistry(source)

    source["email"] = Locator(By.ID, "changed")
    source["extra"] = Locator(By.ID, "extra")

    assert registry.resolve("email").value == "email"
    assert "extra" not in registry
    with pytest.raises(TypeError):
        registry._locators["email"] = Locator(By.ID, "x")


def test_rejects_non_locator_entries():
    with pytest.raises(ConfigurationError):
        LocatorRegistry({"email": "#email"})


def test_locator_is_immutable():
    locator = Locator(By.ID, "email")
    with pytest.raises(FrozenInstanceError):
        locator.value = "other"


@pytest.mark.parametrize(
    "locator, selector",
    [
        (Locator(By.ID, "email"), "id=email"),
        (Locator(By.CSS, "#login-btn"), "css=#login-btn"),
        (Locator(By.XPATH, "//button[@type='submit']"), "xpath=//button[@type='submit']"),
        (Locator(By.TEXT, "Log in"), "text=Log in"),
        (Locator(By.TEST_ID, "btn-login"), "data-testid=btn-login"),
        (Locator(By.NAME, "username"), 'css=[name="username"]'),
    ],
)
def test_selector_rendering(locator, selector):
    assert locator.selector == selector


def test_login_page_registers_every_element():
    assert LoginPage.LOCATORS.names() == ["email", "error", "password", "submit", "welcome"]
    assert LoginPage.LOCATORS.as_dict()["submit"] == "id=login-btn"
