"""Shared pytest fixtures."""

from __future__ import annotations

import shutil
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

# Load the group first so every command registers before tests import command modules
import csquery.cli  # noqa: F401

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    path = Path(tempfile.mkdtemp())
    try:
        yield path
    finally:
        shutil.rmtree(path, ignore_errors=True)


@pytest.fixture
def sample_config(temp_dir: Path) -> Path:
    """Create a sample config file."""
    config_path = temp_dir / "config.toml"
    config_path.write_text("""[display]
colored_output = false

[output]
format = "json"
indent = 4
""")
    return config_path


@pytest.fixture
def json_document(temp_dir: Path) -> Path:
    """Create a JSON query document."""
    path = temp_dir / "queries.json"
    path.write_text("""{
  "and": [
    "star",
    {"title": "wars", "boost": 2},
    {"not": [{"or": ["trek", "gate"]}]},
    {"year": [null, 2000]}
  ]
}
""")
    return path


@pytest.fixture
def toml_document(temp_dir: Path) -> Path:
    """Create a TOML query document equivalent to json_document."""
    path = temp_dir / "queries.toml"
    path.write_text("""[[query]]
and = [
  "star",
  { title = "wars", boost = 2 },
  { not = [{ or = ["trek", "gate"] }] },
  { year = { upper = 2000 } },
]
""")
    return path
