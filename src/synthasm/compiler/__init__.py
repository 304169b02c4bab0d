"""Compiler collaborators for turning fixture source into assemblies."""

from .base import CompilationResult, Compiler, Diagnostic, DiagnosticSeverity
from .csc import CscCompiler, parse_diagnostics
from .locks import PathLocks, path_locks
from .mock import MockCompiler

__all__ = [
    "Compiler",
    "CompilationResult",
    "Diagnostic",
    "DiagnosticSeverity",
    "CscCompiler",
    "MockCompiler",
    "parse_diagnostics",
    "PathLocks",
    "path_locks",
]
