"""
================================================================================
Locator Registry
================================================================================

Static mapping from symbolic element names to locator strategy + selector.

Page objects declare one registry each; tests and scenarios never see a
selector. When the UI changes, the registry entry is the only thing to update.

Locator strategies map onto Playwright selector engines:

    By.ID       -> id=<value>
    By.CSS      -> css=<value>
    By.XPATH    -> xpath=<value>
    By.TEXT     -> text=<value>
    By.TEST_ID  -> data-testid=<value>
    By.NAME     -> css=[name="<value>"]

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping

from loguru import logger

from .exceptions import ConfigurationError


class By(str, Enum):
    """Locator strategies."""

    ID = "id"
    CSS = "css"
    XPATH = "xpath"
    TEXT = "text"
    TEST_ID = "data-testid"
    NAME = "name"


@dataclass(frozen=True)
class Locator:
    """
    Identifies one semantic UI control.

    Attributes:
        strategy: How ``value`` is interpreted
        value: Selector text for the strategy
    """
    strategy: By
    value: str

    @property
    def selector(self) -> str:
        """Playwright selector-engine string for this locator."""
        if self.strategy is By.NAME:
            return f'css=[name="{self.value}"]'
        return f"{self.strategy.value}={self.value}"

    def __str__(self) -> str:
        return f"{self.strategy.value}={self.value}"


class LocatorRegistry:
    """
    Immutable lookup table of element name -> Locator.

    Usage:
        >>> registry = LocatorRegistry({"email": Locator(By.ID, "email")})
        >>> registry.resolve("email")
        Locator(strategy=<By.ID: 'id'>, value='email')

    Unknown names raise ``ConfigurationError``: a missing entry is a defect in
    the page object, not a condition of the page under test.
    """

    def __init__(self, locators: Mapping[str, Locator]):
        for name, locator in locators.items():
            if not isinstance(locator, Locator):
                raise ConfigurationError(
                    f"Registry entry '{name}' must be a Locator, "
                    f"got {type(locator).__name__}"
                )
        self._locators: Mapping[str, Locator] = MappingProxyType(dict(locators))

    def resolve(self, name: str) -> Locator:
        """
        Look up the locator registered under ``name``.

        Raises:
            ConfigurationError: When ``name`` is not registered
        """
        try:
            return self._locators[name]
        except KeyError:
            known = ", ".join(sorted(self._locators)) or "<none>"
            logger.error(f"❌ Unknown element '{name}' (registered: {known})")
            raise ConfigurationError(
                f"No locator registered for element '{name}'. "
                f"Registered elements: {known}"
            ) from None

    def names(self) -> List[str]:
        return sorted(self._locators)

    def as_dict(self) -> Dict[str, str]:
        """Rendered selectors keyed by element name (for reports)."""
        return {name: str(loc) for name, loc in self._locators.items()}

    def __contains__(self, name: object) -> bool:
        return name in self._locators

    def __iter__(self) -> Iterator[str]:
        return iter(self._locators)

    def __len__(self) -> int:
        return len(self._locators)


__all__ = [
    "By",
    "Locator",
    "LocatorRegistry",
]
