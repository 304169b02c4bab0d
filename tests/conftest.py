"""Pytest configuration and fixtures."""

import os
import threading
from collections.abc import Generator

import pytest

from synthasm.compiler import MockCompiler
from synthasm.config import GenerationSettings


@pytest.fixture
def generation_settings() -> GenerationSettings:
    """Generation parameters with the canonical defaults."""
    return GenerationSettings()


@pytest.fixture
def mock_compiler() -> MockCompiler:
    """Compiler that succeeds and records every compilation."""
    return MockCompiler()


@pytest.fixture(autouse=True)
def clean_synthasm_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep SYNTHASM_* variables from the shell out of settings under test."""
    for key in list(os.environ):
        if key.startswith("SYNTHASM_"):
            monkeypatch.delenv(key)


# Thread names that are expected to be long-running and should be ignored
# by the resource tracker.
_IGNORED_THREAD_PREFIXES = (
    "MainThread",
    "pydevd",  # Debugger threads
)


def _is_tracked_thread(t: threading.Thread) -> bool:
    """Check if a thread should be tracked for leak detection.

    Only non-daemon threads are tracked; daemon threads are killed at exit.
    """
    if t.daemon:
        return False
    return not any(t.name.startswith(prefix) for prefix in _IGNORED_THREAD_PREFIXES)


@pytest.fixture(autouse=True)
def thread_leak_tracker(
    request: pytest.FixtureRequest,
) -> Generator[None, None, None]:
    """Fail tests that leave worker threads running.

    Parallel fixture builds use a thread pool that must be shut down before
    generate_all returns.

    To skip this check for a specific test, use:
        @pytest.mark.no_resource_tracking
    """
    if request.node.get_closest_marker("no_resource_tracking"):
        yield
        return

    baseline_threads = {t for t in threading.enumerate() if _is_tracked_thread(t)}

    yield

    current_threads = {t for t in threading.enumerate() if _is_tracked_thread(t)}
    leaked_threads = current_threads - baseline_threads
    if leaked_threads:
        thread_names = [t.name for t in leaked_threads]
        pytest.fail(
            f"Thread leak detected - {len(leaked_threads)} thread(s): {thread_names}. "
            "Tests must join all threads before completion."
        )


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "no_resource_tracking: skip resource leak checking for this test",
    )
