"""Functional tests: the `recordcheck` CLI driven through Click's CliRunner."""
