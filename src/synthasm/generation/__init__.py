"""Deterministic generation of synthetic C# source."""

from .members import (
    FieldDeclaration,
    MethodDeclaration,
    field_count,
    generate_fields,
    generate_methods,
    method_count,
)
from .naming import field_name, interface_name, method_name, type_name
from .program import generate_source_code, interface_class_split, iter_declarations
from .types import (
    ClassDeclaration,
    InterfaceDeclaration,
    generate_class,
    generate_interface,
)

__all__ = [
    # Naming
    "type_name",
    "interface_name",
    "field_name",
    "method_name",
    # Members
    "FieldDeclaration",
    "MethodDeclaration",
    "field_count",
    "method_count",
    "generate_fields",
    "generate_methods",
    # Types
    "InterfaceDeclaration",
    "ClassDeclaration",
    "generate_interface",
    "generate_class",
    # Program
    "interface_class_split",
    "iter_declarations",
    "generate_source_code",
]
