"""synthasm command-line interface."""

from synthasm.cli.main import cli

__all__ = ["cli"]
