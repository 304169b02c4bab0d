"""synthasm source command."""

import click

from synthasm.config import settings
from synthasm.fixtures import get_fixture_spec
from synthasm.generation import generate_source_code


@click.command()
@click.argument("fixture")
@click.option(
    "--types",
    "-t",
    "type_count",
    type=click.IntRange(min=1),
    default=None,
    help="Override the fixture's type count",
)
def source(fixture: str, type_count: int | None) -> None:
    """Print the generated C# source of FIXTURE.

    FIXTURE is a registered fixture name (small, medium, large).
    """
    try:
        spec = get_fixture_spec(fixture)
    except KeyError as e:
        raise click.ClickException(str(e.args[0]))

    click.echo(
        generate_source_code(
            spec.name, type_count or spec.type_count, settings.generation
        ),
        nl=False,
    )
