"""Adapters for RECORDCHECK.

Provide concrete implementations of the interfaces (currently the in-memory
design client).

Dependency rule: may import `recordcheck.domain` and `recordcheck.interfaces`;
the domain must not import this package.
"""
