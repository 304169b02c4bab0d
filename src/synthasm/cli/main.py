"""synthasm CLI main entry point.

This module provides the main CLI interface for synthasm.
"""

import click

from synthasm import __version__
from synthasm.config import settings
from synthasm.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="synthasm")
@click.option(
    "--log-level",
    default=None,
    help="Logging level (overrides SYNTHASM_LOG_LEVEL)",
)
def cli(log_level: str | None) -> None:
    """synthasm - synthetic C# assemblies for analysis benchmarks.

    Generates deterministic test assemblies of 50, 500 and 2000 types.
    """
    configure_logging(log_level or settings.log_level, settings.log_format)


# Import and register subcommands
from synthasm.cli.fixtures import inspect_cmd, list_cmd  # noqa: E402
from synthasm.cli.generate import generate  # noqa: E402
from synthasm.cli.source import source  # noqa: E402

cli.add_command(generate)
cli.add_command(source)
cli.add_command(list_cmd)
cli.add_command(inspect_cmd)
