"""
Shared pytest fixtures for strhash tests.

- isolated_env: Autouse; clean container, no STRHASH_* env vars, cwd in tmp_path
- strhash_cli: Helper to run the CLI via subprocess (`python -m strhash`)
- config_file: Helper to write a .strhash/config.toml
"""

import os
import subprocess
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

from strhash.core.bootstrap import reset


def _run_strhash_cmd(*args: str, cwd: Path, check: bool = True) -> subprocess.CompletedProcess:
    """Run a strhash command using the current Python interpreter."""
    env = {k: v for k, v in os.environ.items() if not k.startswith("STRHASH_")}
    result = subprocess.run(
        [sys.executable, "-m", "strhash", *args],
        cwd=cwd,
        capture_output=True,
        text=True,
        env=env,
    )
    if check and result.returncode != 0:
        raise subprocess.CalledProcessError(
            result.returncode,
            [sys.executable, "-m", "strhash", *args],
            result.stdout,
            result.stderr,
        )
    return result


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """
    Give every test a clean slate.

    Resets the service container, removes STRHASH_* variables and runs the
    test from tmp_path so no stray config file is picked up.
    """
    for name in list(os.environ):
        if name.startswith("STRHASH_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    reset()
    yield
    reset()


@pytest.fixture
def strhash_cli(tmp_path: Path) -> Callable[..., subprocess.CompletedProcess]:
    """Provide a helper that runs `python -m strhash` in tmp_path."""

    def run_strhash(*args: str, check: bool = True) -> subprocess.CompletedProcess:
        return _run_strhash_cmd(*args, cwd=tmp_path, check=check)

    return run_strhash


@pytest.fixture
def config_file(tmp_path: Path) -> Callable[[str], Path]:
    """
    Provide a helper that writes .strhash/config.toml under tmp_path.

    Returns:
        A callable taking TOML text and returning the written path
    """

    def write(content: str) -> Path:
        path = tmp_path / ".strhash" / "config.toml"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    return write
