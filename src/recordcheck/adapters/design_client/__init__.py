"""Design client adapters."""

from .memory import FakeDesignClient

__all__ = ["FakeDesignClient"]
