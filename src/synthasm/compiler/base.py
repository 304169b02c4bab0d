"""Abstract interface for compilers that turn fixture source into assemblies."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class DiagnosticSeverity(str, Enum):
    """Severity reported by the compiler."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class Diagnostic:
    """A single compiler message."""

    severity: DiagnosticSeverity
    message: str
    code: str | None = None
    line: int | None = None
    column: int | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is DiagnosticSeverity.ERROR

    def __str__(self) -> str:
        location = ""
        if self.line is not None:
            location = f"({self.line},{self.column or 0}): "
        code = f" {self.code}" if self.code else ""
        return f"{location}{self.severity.value}{code}: {self.message}"


@dataclass
class CompilationResult:
    """Outcome of compiling one source unit."""

    success: bool
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.is_error]

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity is DiagnosticSeverity.WARNING]


class Compiler(ABC):
    """Abstract base class for C# compilers.

    Implementations must resolve all declarations of a compilation unit
    regardless of textual order: generated fields reference classes that
    may be declared later in the same unit.
    """

    @abstractmethod
    def compile(self, source_text: str, output_path: Path) -> CompilationResult:
        """Compile source text into a library at output_path.

        Args:
            source_text: Complete C# compilation unit
            output_path: Destination of the emitted assembly

        Returns:
            CompilationResult; success is False when any error was reported

        Raises:
            CompilerTimeoutError: If compilation exceeds the configured timeout
            FixtureEnvironmentError: If the compiler cannot be started
        """
        ...
