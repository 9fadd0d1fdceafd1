"""Pytest configuration and shared fixtures for ParamConf tests."""

import tempfile
from pathlib import Path
from typing import Iterator

import pytest
from paramconf import ParameterStore


@pytest.fixture
def temp_dir() -> Iterator[Path]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def store() -> ParameterStore:
    """Create a store with one defaulted and one unset parameter."""
    store = ParameterStore()
    store.register("learning_rate", "0.01")
    store.register("model_path")
    return store


def write_config_file(file_path: Path, content: str) -> Path:
    """Write raw parameter file content.

    Args:
        file_path: Path to write file
        content: File content, written verbatim

    Returns:
        The written path
    """
    with open(file_path, "w", newline="") as f:
        f.write(content)
    return file_path
