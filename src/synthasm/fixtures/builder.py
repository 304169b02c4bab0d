"""Fixture building: generate source, compile it, write the assembly.

Generation is pure; only the compile step touches the filesystem and is
guarded by a lock on the output path.
"""

from __future__ import annotations

import time
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import structlog

from synthasm.compiler import Compiler, CscCompiler, PathLocks, path_locks
from synthasm.config import GenerationSettings, settings
from synthasm.exceptions import (
    CompilationError,
    CompilerTimeoutError,
    FixtureEnvironmentError,
)
from synthasm.generation import generate_source_code

from .specs import FIXTURE_SPECS, FixtureSpec

logger = structlog.get_logger()


def ensure_output_directory(output_dir: Path) -> Path:
    """Create the output directory if it does not exist.

    Raises:
        FixtureEnvironmentError: If the directory cannot be created
    """
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error("fixture.output_dir_failed", path=str(output_dir), error=str(e))
        raise FixtureEnvironmentError(
            f"Cannot create output directory {output_dir}: {e}"
        ) from e
    return output_dir


def generate_fixture(
    spec: FixtureSpec,
    output_dir: Path,
    compiler: Compiler | None = None,
    generation: GenerationSettings | None = None,
    locks: PathLocks | None = None,
) -> Path:
    """Generate and compile a single fixture.

    Args:
        spec: Fixture to build
        output_dir: Existing directory receiving the assembly
        compiler: Compiler collaborator (CscCompiler from settings by default)
        generation: Generation parameters (settings.generation by default)
        locks: Lock registry guarding output paths (process-wide by default)

    Returns:
        Path to the compiled assembly

    Raises:
        CompilationError: If the compiler reported errors or timed out
        FixtureEnvironmentError: If the assembly cannot be written
    """
    compiler = compiler or CscCompiler(settings.compiler)
    generation = generation or settings.generation
    locks = locks or path_locks

    log = logger.bind(fixture=spec.name, type_count=spec.type_count)
    log.info("fixture.generating")

    source_code = generate_source_code(spec.name, spec.type_count, generation)
    assembly_path = output_dir / spec.output_path

    start = time.time()
    with locks.hold(assembly_path):
        try:
            result = compiler.compile(source_code, assembly_path)
        except CompilerTimeoutError as e:
            log.error("fixture.compile_timeout", timeout_seconds=e.timeout_seconds)
            raise CompilerTimeoutError(spec.name, e.timeout_seconds) from e
        except OSError as e:
            log.error("fixture.write_failed", path=str(assembly_path), error=str(e))
            raise FixtureEnvironmentError(
                f"Cannot write assembly {assembly_path}: {e}"
            ) from e

    if not result.success:
        log.error(
            "fixture.compile_failed",
            error_count=len(result.errors),
            first_error=str(result.errors[0]) if result.errors else None,
        )
        raise CompilationError(spec.name, result.diagnostics)

    log.info(
        "fixture.compiled",
        path=str(assembly_path),
        warnings=len(result.warnings),
        duration_seconds=round(time.time() - start, 3),
    )
    return assembly_path


def generate_all(
    output_dir: Path,
    compiler: Compiler | None = None,
    generation: GenerationSettings | None = None,
    specs: Sequence[FixtureSpec] = FIXTURE_SPECS,
    max_workers: int = 1,
) -> list[Path]:
    """Generate every registered fixture into output_dir.

    Fixtures are built in order (Small, Medium, Large by default). The batch
    is fail-fast: the first failure is raised and later fixtures are not
    reported. With ``max_workers > 1`` fixtures compile concurrently and the
    first failure in spec order is raised.

    Args:
        output_dir: Directory for the assemblies, created if absent
        compiler: Compiler collaborator (CscCompiler from settings by default)
        generation: Generation parameters (settings.generation by default)
        specs: Fixtures to build
        max_workers: Number of fixtures compiled concurrently

    Returns:
        Paths of the compiled assemblies in spec order
    """
    ensure_output_directory(output_dir)
    compiler = compiler or CscCompiler(settings.compiler)

    if max_workers <= 1:
        return [
            generate_fixture(spec, output_dir, compiler, generation)
            for spec in specs
        ]

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [
            executor.submit(generate_fixture, spec, output_dir, compiler, generation)
            for spec in specs
        ]
        try:
            return [future.result() for future in futures]
        except (CompilationError, FixtureEnvironmentError):
            for future in futures:
                future.cancel()
            raise
