"""Entrypoints (inbound adapters) for RECORDCHECK.

Expose the application to the outside world: currently the CLI. Parse and
validate inputs, call the domain, and present results.
"""
