"""Mock compiler implementation for testing."""

from pathlib import Path

from .base import CompilationResult, Compiler, Diagnostic


class MockCompiler(Compiler):
    """Mock compiler that records its inputs instead of invoking csc.

    On success it writes the source text to the output path so callers can
    check that an artifact was produced. When constructed with diagnostics,
    every compilation fails with them and nothing is written.
    """

    def __init__(self, diagnostics: list[Diagnostic] | None = None) -> None:
        """Initialize the mock compiler.

        Args:
            diagnostics: Diagnostics to report on every call; an error among
                them makes the compilation fail
        """
        self._diagnostics = list(diagnostics or [])
        self.calls: list[tuple[str, Path]] = []

    def compile(self, source_text: str, output_path: Path) -> CompilationResult:
        self.calls.append((source_text, output_path))

        success = not any(d.is_error for d in self._diagnostics)
        if success:
            output_path.write_text(source_text, encoding="utf-8")
        return CompilationResult(success=success, diagnostics=list(self._diagnostics))
