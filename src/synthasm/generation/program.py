"""Whole-program source generation.

A fixture is one C# compilation unit: the common usings, a file-scoped
namespace named after the assembly, every interface, then every class.
Generation is a pure function of its arguments and is safe to call from
multiple threads.
"""

from collections.abc import Iterator

from synthasm.config import GenerationSettings
from synthasm.generation.types import (
    ClassDeclaration,
    InterfaceDeclaration,
    generate_class,
    generate_interface,
)

USINGS = ("using System;", "using System.Collections.Generic;")


def interface_class_split(
    type_count: int, settings: GenerationSettings | None = None
) -> tuple[int, int]:
    """Split a total type count into interface and class counts.

    Args:
        type_count: Total number of types in the fixture (at least 1)
        settings: Generation parameters; defaults are used when omitted

    Returns:
        Tuple of (interface_count, class_count) summing to ``type_count``

    Raises:
        ValueError: If type_count is less than 1
    """
    if type_count < 1:
        raise ValueError(f"type_count must be at least 1, got {type_count}")
    settings = settings or GenerationSettings()
    interface_count = max(1, type_count // settings.interface_percentage)
    return interface_count, type_count - interface_count


def iter_declarations(
    type_count: int, settings: GenerationSettings | None = None
) -> Iterator[InterfaceDeclaration | ClassDeclaration]:
    """Yield every declaration of a fixture in emission order."""
    settings = settings or GenerationSettings()
    interface_count, class_count = interface_class_split(type_count, settings)

    for i in range(interface_count):
        yield generate_interface(i)

    for i in range(class_count):
        yield generate_class(i, interface_count, settings)


def generate_source_code(
    name: str, type_count: int, settings: GenerationSettings | None = None
) -> str:
    """Generate the complete C# source text of a fixture.

    Args:
        name: Assembly name, also used as the namespace
        type_count: Total number of interfaces and classes
        settings: Generation parameters; defaults are used when omitted

    Returns:
        Source text; identical arguments always produce identical text
    """
    lines = [*USINGS, "", f"namespace {name};", ""]
    for declaration in iter_declarations(type_count, settings):
        lines.extend(declaration.render())
    return "\n".join(lines) + "\n"
