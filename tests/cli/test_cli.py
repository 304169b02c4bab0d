"""Tests for synthasm CLI commands."""

from pathlib import Path

import pytest
from click.testing import CliRunner

import synthasm.cli.generate
import synthasm.cli.main
from synthasm import __version__
from synthasm.cli.main import cli
from synthasm.compiler import Diagnostic, DiagnosticSeverity, MockCompiler
from synthasm.config import CompilerSettings
from synthasm.generation import generate_source_code


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch: pytest.MonkeyPatch) -> None:
    """Leave logging handlers alone; CliRunner swaps stderr per invocation."""
    monkeypatch.setattr(synthasm.cli.main, "configure_logging", lambda *_: None)


@pytest.fixture
def cli_compiler(monkeypatch: pytest.MonkeyPatch) -> MockCompiler:
    """Replace csc in the generate command with a recording mock."""
    compiler = MockCompiler()

    def factory(_settings: CompilerSettings) -> MockCompiler:
        return compiler

    monkeypatch.setattr(synthasm.cli.generate, "CscCompiler", factory)
    return compiler


class TestCliGroup:
    """Tests for the top-level group."""

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help_lists_commands(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        for command in ("generate", "source", "list", "inspect"):
            assert command in result.output


class TestGenerateCommand:
    """Tests for synthasm generate."""

    def test_generates_all_fixtures(
        self, tmp_path: Path, cli_compiler: MockCompiler
    ) -> None:
        output_dir = tmp_path / "assemblies"
        result = CliRunner().invoke(cli, ["generate", str(output_dir)])

        assert result.exit_code == 0, result.output
        assert f"Generating test assemblies in: {output_dir}" in result.output
        assert "Test assembly generation completed successfully." in result.output
        for name in ("Small", "Medium", "Large"):
            assert (output_dir / f"TestAssembly.{name}.dll").exists()

    def test_selected_fixture(
        self, tmp_path: Path, cli_compiler: MockCompiler
    ) -> None:
        result = CliRunner().invoke(
            cli, ["generate", str(tmp_path), "--fixture", "small"]
        )

        assert result.exit_code == 0, result.output
        assert [output.name for _, output in cli_compiler.calls] == [
            "TestAssembly.Small.dll"
        ]

    def test_parallel_workers(self, tmp_path: Path, cli_compiler: MockCompiler) -> None:
        result = CliRunner().invoke(cli, ["generate", str(tmp_path), "-w", "3"])

        assert result.exit_code == 0, result.output
        assert len(cli_compiler.calls) == 3

    def test_unknown_fixture(self, tmp_path: Path, cli_compiler: MockCompiler) -> None:
        result = CliRunner().invoke(
            cli, ["generate", str(tmp_path), "--fixture", "huge"]
        )

        assert result.exit_code == 2
        assert "Unknown fixture: huge" in result.output
        assert cli_compiler.calls == []

    def test_compilation_failure_exits_1(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        failing = MockCompiler(
            [Diagnostic(severity=DiagnosticSeverity.ERROR, message="boom")]
        )
        monkeypatch.setattr(
            synthasm.cli.generate, "CscCompiler", lambda _settings: failing
        )

        result = CliRunner().invoke(cli, ["generate", str(tmp_path)])

        assert result.exit_code == 1
        assert "Error generating test assemblies" in result.output
        assert "Compilation failed for TestAssembly.Small" in result.output
        assert len(failing.calls) == 1

    def test_missing_output_dir_argument(self) -> None:
        result = CliRunner().invoke(cli, ["generate"])
        assert result.exit_code == 2


class TestSourceCommand:
    """Tests for synthasm source."""

    def test_prints_generated_source(self) -> None:
        result = CliRunner().invoke(cli, ["source", "small"])

        assert result.exit_code == 0
        assert result.output == generate_source_code("TestAssembly.Small", 50)

    def test_type_count_override(self) -> None:
        result = CliRunner().invoke(cli, ["source", "small", "--types", "1"])

        assert result.exit_code == 0
        assert result.output == generate_source_code("TestAssembly.Small", 1)

    def test_unknown_fixture(self) -> None:
        result = CliRunner().invoke(cli, ["source", "huge"])
        assert result.exit_code != 0
        assert "Unknown fixture" in result.output


class TestListAndInspect:
    """Tests for synthasm list and synthasm inspect."""

    def test_list(self) -> None:
        result = CliRunner().invoke(cli, ["list"])

        assert result.exit_code == 0
        assert "Registered Fixtures" in result.output
        assert "TestAssembly.Small" in result.output
        assert "(5 interfaces, 45 classes)" in result.output
        assert "(50 interfaces, 450 classes)" in result.output
        assert "(200 interfaces, 1800 classes)" in result.output

    def test_inspect_small(self) -> None:
        result = CliRunner().invoke(cli, ["inspect", "small"])

        assert result.exit_code == 0
        assert "Fixture: TestAssembly.Small" in result.output
        assert "Interfaces: 5" in result.output
        assert "Classes: 45" in result.output
        assert "  abstract: 3" in result.output
        assert "  sealed: 2" in result.output
        assert "  implementing an interface: 9" in result.output

    def test_inspect_unknown(self) -> None:
        result = CliRunner().invoke(cli, ["inspect", "huge"])
        assert result.exit_code != 0
