"""Exceptions for fixture generation and compilation."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from synthasm.compiler.base import Diagnostic


class SynthasmError(Exception):
    """Base exception for synthasm operations."""

    pass


class CompilationError(SynthasmError):
    """Raised when the compiler reports error diagnostics for a fixture."""

    def __init__(self, fixture_name: str, diagnostics: Sequence[Diagnostic]):
        self.fixture_name = fixture_name
        self.diagnostics = list(diagnostics)
        errors = "\n".join(str(d) for d in self.error_diagnostics)
        super().__init__(f"Compilation failed for {fixture_name}:\n{errors}")

    @property
    def error_diagnostics(self) -> list[Diagnostic]:
        """Diagnostics with error severity."""
        return [d for d in self.diagnostics if d.is_error]


class CompilerTimeoutError(CompilationError):
    """Raised when the compiler does not finish within the configured timeout."""

    def __init__(self, fixture_name: str, timeout_seconds: float):
        from synthasm.compiler.base import Diagnostic, DiagnosticSeverity

        self.timeout_seconds = timeout_seconds
        super().__init__(
            fixture_name,
            [
                Diagnostic(
                    severity=DiagnosticSeverity.ERROR,
                    message=f"compiler timed out after {timeout_seconds:g}s",
                )
            ],
        )


class FixtureEnvironmentError(SynthasmError):
    """Raised when the output location or compiler executable is unusable."""

    pass
