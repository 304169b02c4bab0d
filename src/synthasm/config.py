"""synthasm Configuration Module.

Provides centralized configuration for fixture generation and compilation.
All settings support environment variable overrides with SYNTHASM_ prefix.

Usage:
    from synthasm.config import settings

    # Structural distribution of generated types
    print(settings.generation.abstract_class_frequency)

    # Compiler invocation
    print(settings.compiler.csc_command)
"""

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = [
    "CompilerSettings",
    "GenerationSettings",
    "SynthasmSettings",
    "settings",
]


class GenerationSettings(BaseModel):
    """Frequency parameters governing the structure of generated types.

    Each frequency is a modulus applied to a type index: a class whose index
    is divisible by ``abstract_class_frequency`` is abstract, and so on.
    """

    interface_percentage: int = Field(
        default=10,
        ge=1,
        description="Types per interface (interface count = type count // this)",
    )
    abstract_class_frequency: int = Field(
        default=15,
        ge=1,
        description="Every Nth class is abstract",
    )
    sealed_class_frequency: int = Field(
        default=20,
        ge=1,
        description="Every Nth class is sealed, unless it is already abstract",
    )
    interface_implementation_frequency: int = Field(
        default=5,
        ge=1,
        description="Every Nth class implements one interface",
    )
    class_index_offset: int = Field(
        default=1000,
        ge=1,
        description="Offset added to class indices to keep class names "
        "disjoint from interface names",
    )


class CompilerSettings(BaseModel):
    """Settings for the external C# compiler."""

    csc_command: list[str] = Field(
        default=["csc"],
        description="Command used to invoke the C# compiler "
        "(e.g. ['dotnet', '/usr/share/dotnet/sdk/8.0.100/Roslyn/bincore/csc.dll'])",
    )
    timeout_seconds: float = Field(
        default=300.0,
        gt=0,
        description="Maximum time a single compilation may take",
    )
    references: list[str] = Field(
        default_factory=list,
        description="Additional metadata references passed as -reference:<path>",
    )


class SynthasmSettings(BaseSettings):
    """synthasm configuration.

    All settings can be overridden via environment variables with SYNTHASM_
    prefix. Nested settings use a double underscore, for example
    SYNTHASM_GENERATION__SEALED_CLASS_FREQUENCY=25.
    """

    model_config = SettingsConfigDict(
        env_prefix="SYNTHASM_",
        env_nested_delimiter="__",
    )

    log_level: str = Field(
        default="info",
        description="Logging level (debug, info, warning, error)",
    )
    log_format: str = Field(
        default="console",
        description="Log output format ('console' or 'json')",
    )
    max_workers: int = Field(
        default=1,
        ge=1,
        description="Number of fixtures compiled concurrently by generate_all",
    )

    generation: GenerationSettings = Field(default_factory=GenerationSettings)
    compiler: CompilerSettings = Field(default_factory=CompilerSettings)


# Module-level singleton
settings = SynthasmSettings()
