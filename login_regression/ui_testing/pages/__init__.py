"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for application pages.

Each page class encapsulates:
    - Element locators (one LocatorRegistry per page)
    - Page-specific actions
    - Outcome classification

================================================================================
"""

from .login_page import LoginPage

__all__ = [
    "LoginPage",
]
