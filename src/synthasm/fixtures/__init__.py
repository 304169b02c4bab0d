"""Fixture specs and the builder that compiles them."""

from .builder import ensure_output_directory, generate_all, generate_fixture
from .specs import FIXTURE_SPECS, LARGE, MEDIUM, SMALL, FixtureSpec, get_fixture_spec

__all__ = [
    "FixtureSpec",
    "SMALL",
    "MEDIUM",
    "LARGE",
    "FIXTURE_SPECS",
    "get_fixture_spec",
    "ensure_output_directory",
    "generate_fixture",
    "generate_all",
]
