"""Interfaces (application boundary) for RECORDCHECK.

Defines abstract contracts implemented by `recordcheck.adapters`. Business
rules stay out of this package.
"""

from .design_client import DesignClient

__all__ = ["DesignClient"]
