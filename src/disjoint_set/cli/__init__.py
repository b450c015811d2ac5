"""Command-line interface for disjoint sets."""

from disjoint_set.cli.main import app

__all__ = ["app"]
