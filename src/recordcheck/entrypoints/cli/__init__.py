"""RECORDCHECK command-line interface."""
