"""synthasm generate command."""

from pathlib import Path

import click

from synthasm.compiler import CscCompiler
from synthasm.config import settings
from synthasm.exceptions import SynthasmError
from synthasm.fixtures import FIXTURE_SPECS, generate_all, get_fixture_spec


@click.command()
@click.argument("output_dir", type=click.Path(file_okay=False, path_type=Path))
@click.option(
    "--fixture",
    "-f",
    "fixture_names",
    multiple=True,
    help="Fixture to generate (small, medium, large). Repeatable; default all.",
)
@click.option(
    "--workers",
    "-w",
    type=click.IntRange(min=1),
    default=None,
    help="Fixtures compiled concurrently (default: SYNTHASM_MAX_WORKERS)",
)
def generate(
    output_dir: Path, fixture_names: tuple[str, ...], workers: int | None
) -> None:
    """Generate test assemblies in OUTPUT_DIR.

    OUTPUT_DIR is created if it does not exist.
    """
    try:
        specs = (
            [get_fixture_spec(name) for name in fixture_names]
            if fixture_names
            else list(FIXTURE_SPECS)
        )
    except KeyError as e:
        raise click.BadParameter(str(e.args[0]), param_hint="--fixture")

    click.echo(f"Generating test assemblies in: {output_dir}")

    try:
        paths = generate_all(
            output_dir,
            compiler=CscCompiler(settings.compiler),
            generation=settings.generation,
            specs=specs,
            max_workers=workers or settings.max_workers,
        )
    except SynthasmError as e:
        click.echo(f"Error generating test assemblies: {e}", err=True)
        raise SystemExit(1)

    for path in paths:
        click.echo(f"  {path}")
    click.echo("Test assembly generation completed successfully.")
