"""Interface and class declarations."""

from dataclasses import dataclass, field

from synthasm.config import GenerationSettings
from synthasm.generation.members import (
    INDENT,
    FieldDeclaration,
    MethodDeclaration,
    generate_fields,
    generate_methods,
)
from synthasm.generation.naming import interface_name, type_name

# Members every generated interface declares, in declaration order
INTERFACE_MEMBERS = ("void Execute();", "string GetName();")


@dataclass(frozen=True)
class InterfaceDeclaration:
    """A generated interface with the fixed two-member contract."""

    index: int
    visibility: str

    @property
    def name(self) -> str:
        return interface_name(self.index)

    @property
    def members(self) -> tuple[str, ...]:
        return INTERFACE_MEMBERS

    def render(self) -> list[str]:
        lines = [f"{self.visibility} interface {self.name}", "{"]
        lines.extend(f"{INDENT}{member}" for member in self.members)
        lines.extend(["}", ""])
        return lines


@dataclass(frozen=True)
class ClassDeclaration:
    """A generated class.

    The body is emitted as fields, then methods, then the two members
    satisfying ``implemented_interface`` when there is one.
    """

    index: int
    name: str
    visibility: str
    is_abstract: bool
    is_sealed: bool
    implemented_interface: str | None
    fields: list[FieldDeclaration] = field(default_factory=list)
    methods: list[MethodDeclaration] = field(default_factory=list)

    @property
    def implements_interface(self) -> bool:
        return self.implemented_interface is not None

    def interface_members(self) -> list[str]:
        """Concrete bodies for the interface contract, empty if none is implemented."""
        if not self.implements_interface:
            return []
        return [
            f"{INDENT}public void Execute() {{ }}",
            f'{INDENT}public string GetName() => "{self.name}";',
        ]

    def render(self) -> list[str]:
        modifiers = ""
        if self.is_abstract:
            modifiers += "abstract "
        if self.is_sealed:
            modifiers += "sealed "
        bases = f" : {self.implemented_interface}" if self.implemented_interface else ""

        lines = [f"{self.visibility} {modifiers}class {self.name}{bases}", "{"]
        for declaration in self.fields:
            lines.extend(declaration.render())
        lines.append("")
        for method in self.methods:
            lines.extend(method.render())
        if self.implements_interface:
            lines.extend(self.interface_members())
            lines.append("")
        lines.extend(["}", ""])
        return lines


def generate_interface(index: int) -> InterfaceDeclaration:
    """Generate the interface at ``index``; every third one is public."""
    visibility = "public" if index % 3 == 0 else "internal"
    return InterfaceDeclaration(index=index, visibility=visibility)


def generate_class(
    index: int,
    interface_count: int,
    settings: GenerationSettings | None = None,
) -> ClassDeclaration:
    """Generate the class at loop index ``index``.

    Args:
        index: Zero-based class index; the emitted name adds the class offset
        interface_count: Number of interfaces declared in the same fixture
        settings: Generation parameters; defaults are used when omitted

    Returns:
        The class declaration. Abstract and sealed never both apply; an
        abstract class that implements an interface still gets concrete
        bodies for the interface members.
    """
    settings = settings or GenerationSettings()

    is_abstract = index % settings.abstract_class_frequency == 0
    is_sealed = index % settings.sealed_class_frequency == 0 and not is_abstract

    implements = (
        index % settings.interface_implementation_frequency == 0
        and interface_count > 0
    )
    implemented = interface_name(index % interface_count) if implements else None

    return ClassDeclaration(
        index=index,
        name=type_name(index + settings.class_index_offset),
        visibility="public" if index % 4 == 0 else "internal",
        is_abstract=is_abstract,
        is_sealed=is_sealed,
        implemented_interface=implemented,
        fields=generate_fields(index, settings),
        methods=generate_methods(index),
    )
