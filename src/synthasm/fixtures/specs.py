"""Registered fixture specifications.

Each fixture is a single assembly whose namespace and file name derive
from its spec. The three canonical sizes are used by the analysis
benchmarks and must keep these exact names and type counts.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FixtureSpec:
    """Specification of one test assembly.

    Attributes:
        name: Assembly name and namespace
        type_count: Total number of types to generate
        output_path: File name of the compiled assembly
    """

    name: str
    type_count: int
    output_path: str

    def __post_init__(self) -> None:
        """Validate spec parameters."""
        if self.type_count < 1:
            raise ValueError(f"type_count must be positive, got {self.type_count}")
        if not self.name:
            raise ValueError("name must not be empty")

    @property
    def short_name(self) -> str:
        """Last dotted component of the name, lowercased (e.g. "small")."""
        return self.name.rsplit(".", 1)[-1].lower()


# Small test assembly for basic testing scenarios
SMALL = FixtureSpec("TestAssembly.Small", 50, "TestAssembly.Small.dll")

# Medium test assembly for moderate complexity testing
MEDIUM = FixtureSpec("TestAssembly.Medium", 500, "TestAssembly.Medium.dll")

# Large test assembly for performance and scalability testing
LARGE = FixtureSpec("TestAssembly.Large", 2000, "TestAssembly.Large.dll")

# Generation order for batch runs
FIXTURE_SPECS: tuple[FixtureSpec, ...] = (SMALL, MEDIUM, LARGE)


def get_fixture_spec(name: str) -> FixtureSpec:
    """Look up a registered spec by short name or full assembly name.

    Args:
        name: "small", "TestAssembly.Small", etc. (case-insensitive)

    Returns:
        The matching FixtureSpec

    Raises:
        KeyError: If no registered spec matches
    """
    wanted = name.lower()
    for spec in FIXTURE_SPECS:
        if wanted in (spec.short_name, spec.name.lower()):
            return spec
    valid = ", ".join(spec.short_name for spec in FIXTURE_SPECS)
    raise KeyError(f"Unknown fixture: {name}. Valid fixtures: {valid}")
