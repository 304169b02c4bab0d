"""synthasm fixture listing and inspection commands."""

import click

from synthasm.config import settings
from synthasm.fixtures import FIXTURE_SPECS, get_fixture_spec
from synthasm.generation import (
    ClassDeclaration,
    interface_class_split,
    iter_declarations,
)


@click.command("list")
def list_cmd() -> None:
    """List registered fixtures."""
    click.echo("Registered Fixtures")
    click.echo("=" * 60)

    for spec in FIXTURE_SPECS:
        interface_count, class_count = interface_class_split(
            spec.type_count, settings.generation
        )
        click.echo(
            f"{spec.short_name:<8} {spec.name:<22} {spec.type_count:>5} types "
            f"({interface_count} interfaces, {class_count} classes) "
            f"-> {spec.output_path}"
        )


@click.command("inspect")
@click.argument("fixture")
def inspect_cmd(fixture: str) -> None:
    """Summarize the structure of FIXTURE without compiling it."""
    try:
        spec = get_fixture_spec(fixture)
    except KeyError as e:
        raise click.ClickException(str(e.args[0]))

    interfaces = 0
    classes: list[ClassDeclaration] = []
    for declaration in iter_declarations(spec.type_count, settings.generation):
        if isinstance(declaration, ClassDeclaration):
            classes.append(declaration)
        else:
            interfaces += 1

    click.echo(f"Fixture: {spec.name}")
    click.echo(f"Interfaces: {interfaces}")
    click.echo(f"Classes: {len(classes)}")
    click.echo(f"  public: {sum(1 for c in classes if c.visibility == 'public')}")
    click.echo(f"  abstract: {sum(1 for c in classes if c.is_abstract)}")
    click.echo(f"  sealed: {sum(1 for c in classes if c.is_sealed)}")
    click.echo(
        f"  implementing an interface: "
        f"{sum(1 for c in classes if c.implements_interface)}"
    )
    click.echo(f"Fields: {sum(len(c.fields) for c in classes)}")
    click.echo(f"Methods: {sum(len(c.methods) for c in classes)}")
