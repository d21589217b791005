"""RECORDCHECK

A small token parser and an immutable record fixture, used to demonstrate
per-field versus structural assertion styles in tests.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
