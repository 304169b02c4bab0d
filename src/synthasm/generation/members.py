"""Field and method generation for a single generated class.

Every property of a member is derived from its position within the type
and from the type index, so the same index always yields the same members.
"""

from dataclasses import dataclass

from synthasm.config import GenerationSettings
from synthasm.generation.naming import field_name, method_name, type_name

INDENT = "    "

FIELD_VISIBILITIES = ("private", "protected", "public")
METHOD_VISIBILITIES = ("public", "protected", "internal", "private")
METHOD_RETURN_TYPES = ("void", "string", "int", "object")

DEFAULT_RETURN_VALUES: dict[str, str] = {
    "string": '"default"',
    "int": "0",
}


@dataclass(frozen=True)
class FieldDeclaration:
    """A generated field."""

    index: int
    visibility: str
    is_static: bool
    is_readonly: bool
    field_type: str

    @property
    def name(self) -> str:
        return f"_{field_name(self.index)}"

    def render(self) -> list[str]:
        modifiers = ""
        if self.is_static:
            modifiers += "static "
        if self.is_readonly:
            modifiers += "readonly "
        return [f"{INDENT}{self.visibility} {modifiers}{self.field_type} {self.name};"]


@dataclass(frozen=True)
class MethodDeclaration:
    """A generated method with a trivial body."""

    index: int
    visibility: str
    is_static: bool
    is_virtual: bool
    return_type: str
    parameters: str

    @property
    def name(self) -> str:
        return method_name(self.index)

    @property
    def default_return(self) -> str | None:
        """Literal returned by the body, or None for void methods."""
        if self.return_type == "void":
            return None
        return DEFAULT_RETURN_VALUES.get(self.return_type, "null")

    def render(self) -> list[str]:
        modifiers = ""
        if self.is_static:
            modifiers += "static "
        if self.is_virtual:
            modifiers += "virtual "

        lines = [
            f"{INDENT}{self.visibility} {modifiers}{self.return_type} "
            f"{self.name}({self.parameters})",
            f"{INDENT}{{",
        ]
        if self.default_return is not None:
            lines.append(f"{INDENT}{INDENT}return {self.default_return};")
        lines.append(f"{INDENT}}}")
        lines.append("")
        return lines


def field_count(type_index: int) -> int:
    """Number of fields for a type: 2 to 5."""
    return 2 + (type_index % 4)


def method_count(type_index: int) -> int:
    """Number of methods for a type: 3 to 6."""
    return 3 + (type_index % 4)


def _field_type(type_index: int, i: int, settings: GenerationSettings) -> str:
    kind = i % 5
    if kind == 0:
        return "string"
    if kind == 1:
        return "int"
    if kind == 2:
        return "List<string>"
    if kind == 3:
        # Back-reference to another generated class, resolved by name only
        max_class_index = max(10, type_index)
        target = (type_index + i) % max_class_index
        return type_name(target + settings.class_index_offset)
    return "object"


def _method_parameters(i: int) -> str:
    shape = i % 3
    if shape == 0:
        return f"string param{i}"
    if shape == 1:
        return f"int value{i}, object data{i}"
    return ""


def generate_fields(
    type_index: int, settings: GenerationSettings | None = None
) -> list[FieldDeclaration]:
    """Generate the fields of the type at ``type_index``.

    Args:
        type_index: Zero-based class index (before the name offset)
        settings: Generation parameters; defaults are used when omitted

    Returns:
        Field declarations in emission order
    """
    settings = settings or GenerationSettings()
    return [
        FieldDeclaration(
            index=i,
            visibility=FIELD_VISIBILITIES[i % 3],
            is_static=i % 8 == 0,
            is_readonly=i % 6 == 0,
            field_type=_field_type(type_index, i, settings),
        )
        for i in range(field_count(type_index))
    ]


def generate_methods(type_index: int) -> list[MethodDeclaration]:
    """Generate the methods of the type at ``type_index``.

    Static and virtual are mutually exclusive; static wins.
    """
    methods: list[MethodDeclaration] = []
    for i in range(method_count(type_index)):
        is_static = i % 10 == 0
        methods.append(
            MethodDeclaration(
                index=i,
                visibility=METHOD_VISIBILITIES[i % 4],
                is_static=is_static,
                is_virtual=i % 7 == 0 and not is_static,
                return_type=METHOD_RETURN_TYPES[i % 4],
                parameters=_method_parameters(i),
            )
        )
    return methods
