"""CLI helpers for RECORDCHECK.

Utilities used by the command-line interface: logger-level option parsing and
message emitters that write to stderr with emoji→ASCII fallbacks.
"""

from .log_level_parser import parse_log_level
from .messages import error, warn

__all__ = ["parse_log_level", "warn", "error"]
