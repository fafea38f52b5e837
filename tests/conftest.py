"""Shared pytest fixtures for the restcrud test suite.

Provides reusable fixtures for:
- Temporary scaffold target directories
- The golden copy of the default generated project
- Default and customised ``ScaffoldConfig`` instances
- A clean environment with no ``RESTCRUD_*`` variables set
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from restcrud.config import ScaffoldConfig


GOLDEN_DIR = Path(__file__).parent / "fixtures" / "golden"

# Every file the scaffolder writes, relative to the target root.
GENERATED_FILES = [
    "app.js",
    ".env",
    "package.json",
    "models/user.js",
    "controllers/userController.js",
    "routes/userRoutes.js",
]


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_project_dir(tmp_path: Path) -> Path:
    """Empty directory to scaffold into (auto-cleanup)."""
    project_dir = tmp_path / "my-crud-api"
    project_dir.mkdir()
    yield project_dir


@pytest.fixture
def golden_dir() -> Path:
    """Directory holding the expected output of a default run."""
    assert GOLDEN_DIR.is_dir(), f"Golden fixtures not found at {GOLDEN_DIR}"
    return GOLDEN_DIR


@pytest.fixture
def golden_files(golden_dir: Path) -> dict[str, bytes]:
    """Mapping of relative path -> expected bytes for a default run."""
    return {name: (golden_dir / name).read_bytes() for name in GENERATED_FILES}


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def clean_env():
    """Run the test with every ``RESTCRUD_*`` variable removed."""
    env = {k: v for k, v in os.environ.items() if not k.startswith("RESTCRUD_")}
    with patch.dict(os.environ, env, clear=True):
        yield


@pytest.fixture
def default_config(tmp_project_dir: Path) -> ScaffoldConfig:
    """Default settings pointed at the temporary project directory."""
    return ScaffoldConfig(root_dir=tmp_project_dir)


@pytest.fixture
def custom_config(tmp_project_dir: Path) -> ScaffoldConfig:
    """Non-default settings pointed at the temporary project directory."""
    return ScaffoldConfig(
        root_dir=tmp_project_dir,
        project_name="shop-api",
        port=4100,
        mongo_uri="mongodb://db.internal:27017/shop",
    )
