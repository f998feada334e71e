"""
Login regression harness.

The package stays importable so that:
  - the live browser scenarios and the offline unit suite share one framework
  - scenarios can be driven programmatically (``run_scenario``) outside pytest

All defaults are demo-safe and carry no real credentials.
"""

__version__ = "1.0.0"
