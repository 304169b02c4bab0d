"""C# compiler adapter that shells out to csc."""

from __future__ import annotations

import re
import shutil
import subprocess
import tempfile
from pathlib import Path

import structlog

from synthasm.config import CompilerSettings
from synthasm.exceptions import CompilerTimeoutError, FixtureEnvironmentError

from .base import CompilationResult, Compiler, Diagnostic, DiagnosticSeverity

logger = structlog.get_logger()

# Matches e.g. "Fixture.cs(12,5): error CS0246: The type ... could not be found"
_DIAGNOSTIC_RE = re.compile(
    r"^(?:.*?\((?P<line>\d+),(?P<column>\d+)\)\s*:\s*)?"
    r"(?P<severity>error|warning|info)\s+(?P<code>[A-Z]+\d+)\s*:\s*(?P<message>.*)$"
)


def parse_diagnostics(output: str) -> list[Diagnostic]:
    """Parse csc output into diagnostics.

    Lines that do not look like compiler messages are ignored.

    Args:
        output: Combined stdout and stderr of a csc run

    Returns:
        Diagnostics in the order they were printed
    """
    diagnostics: list[Diagnostic] = []
    for raw_line in output.splitlines():
        match = _DIAGNOSTIC_RE.match(raw_line.strip())
        if not match:
            continue
        line = match.group("line")
        column = match.group("column")
        diagnostics.append(
            Diagnostic(
                severity=DiagnosticSeverity(match.group("severity")),
                message=match.group("message").strip(),
                code=match.group("code"),
                line=int(line) if line else None,
                column=int(column) if column else None,
            )
        )
    return diagnostics


class CscCompiler(Compiler):
    """Compiles fixture source into a class library with csc.

    The command comes from CompilerSettings.csc_command, so either a native
    csc or `dotnet <sdk>/Roslyn/bincore/csc.dll` can be used.
    """

    def __init__(self, compiler_settings: CompilerSettings | None = None) -> None:
        self._settings = compiler_settings or CompilerSettings()

    def build_command(self, source_path: Path, output_path: Path) -> list[str]:
        """Build the csc command line for one compilation."""
        command = [
            *self._settings.csc_command,
            "-nologo",
            "-target:library",
            "-langversion:latest",
            "-optimize+",
            "-platform:anycpu",
            f"-out:{output_path}",
        ]
        command.extend(f"-reference:{ref}" for ref in self._settings.references)
        command.append(str(source_path))
        return command

    def compile(self, source_text: str, output_path: Path) -> CompilationResult:
        executable = self._settings.csc_command[0]
        if shutil.which(executable) is None:
            raise FixtureEnvironmentError(
                f"C# compiler not found: {executable}. "
                "Set SYNTHASM_COMPILER__CSC_COMMAND to a working csc command."
            )

        with tempfile.TemporaryDirectory(prefix="synthasm-") as tmp:
            source_path = Path(tmp) / f"{output_path.stem}.cs"
            source_path.write_text(source_text, encoding="utf-8")

            command = self.build_command(source_path, output_path)
            logger.debug("compiler.invoking", command=command)

            try:
                result = subprocess.run(
                    command,
                    capture_output=True,
                    text=True,
                    timeout=self._settings.timeout_seconds,
                )
            except subprocess.TimeoutExpired as e:
                logger.error(
                    "compiler.timeout",
                    output=str(output_path),
                    timeout_seconds=self._settings.timeout_seconds,
                )
                raise CompilerTimeoutError(
                    output_path.stem, self._settings.timeout_seconds
                ) from e
            except OSError as e:
                raise FixtureEnvironmentError(
                    f"Failed to run C# compiler {executable}: {e}"
                ) from e

        diagnostics = parse_diagnostics(result.stdout + "\n" + result.stderr)
        success = result.returncode == 0 and not any(d.is_error for d in diagnostics)

        if not success and not any(d.is_error for d in diagnostics):
            # Non-zero exit without parseable messages
            message = (result.stderr or result.stdout).strip() or (
                f"csc exited with code {result.returncode}"
            )
            diagnostics.append(
                Diagnostic(severity=DiagnosticSeverity.ERROR, message=message)
            )

        return CompilationResult(success=success, diagnostics=diagnostics)
