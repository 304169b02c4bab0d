"""Tests for synthasm configuration module."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from synthasm.config import CompilerSettings, GenerationSettings, SynthasmSettings


class TestGenerationSettings:
    """Tests for GenerationSettings."""

    def test_default_values(self) -> None:
        """Defaults reproduce the canonical distribution."""
        generation = GenerationSettings()

        assert generation.interface_percentage == 10
        assert generation.abstract_class_frequency == 15
        assert generation.sealed_class_frequency == 20
        assert generation.interface_implementation_frequency == 5
        assert generation.class_index_offset == 1000

    @pytest.mark.parametrize(
        "field",
        [
            "interface_percentage",
            "abstract_class_frequency",
            "sealed_class_frequency",
            "interface_implementation_frequency",
        ],
    )
    def test_frequencies_must_be_positive(self, field: str) -> None:
        """A zero modulus is rejected."""
        with pytest.raises(ValidationError):
            GenerationSettings(**{field: 0})


class TestCompilerSettings:
    """Tests for CompilerSettings."""

    def test_default_values(self) -> None:
        compiler = CompilerSettings()

        assert compiler.csc_command == ["csc"]
        assert compiler.timeout_seconds == 300.0
        assert compiler.references == []

    def test_timeout_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            CompilerSettings(timeout_seconds=0)


class TestSynthasmSettings:
    """Tests for SynthasmSettings class."""

    def test_default_values(self) -> None:
        settings = SynthasmSettings()

        assert settings.log_level == "info"
        assert settings.log_format == "console"
        assert settings.max_workers == 1
        assert settings.generation == GenerationSettings()
        assert settings.compiler == CompilerSettings()

    def test_env_override(self) -> None:
        """Environment variables override top-level defaults."""
        with patch.dict(os.environ, {"SYNTHASM_MAX_WORKERS": "3"}):
            settings = SynthasmSettings()
            assert settings.max_workers == 3

    def test_nested_env_override(self) -> None:
        """Nested settings use a double underscore delimiter."""
        with patch.dict(
            os.environ,
            {
                "SYNTHASM_GENERATION__SEALED_CLASS_FREQUENCY": "25",
                "SYNTHASM_COMPILER__TIMEOUT_SECONDS": "60",
            },
        ):
            settings = SynthasmSettings()
            assert settings.generation.sealed_class_frequency == 25
            assert settings.generation.abstract_class_frequency == 15
            assert settings.compiler.timeout_seconds == 60.0

    def test_compiler_command_from_json(self) -> None:
        """List settings are read from JSON."""
        with patch.dict(
            os.environ,
            {"SYNTHASM_COMPILER__CSC_COMMAND": '["dotnet", "/sdk/csc.dll"]'},
        ):
            settings = SynthasmSettings()
            assert settings.compiler.csc_command == ["dotnet", "/sdk/csc.dll"]
