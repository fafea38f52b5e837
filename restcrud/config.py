"""restcrud configuration.

Typed settings for a scaffolding run.  Uses a Pydantic v2 model so values
are validated at construction time, whether they come from keyword
arguments, environment variables, or the command line.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


DEFAULT_PROJECT_NAME = "my-crud-api"
DEFAULT_PORT = 3000
DEFAULT_MONGO_URI = "mongodb://localhost:27017/mydatabase"


class ScaffoldConfig(BaseModel):
    """Settings for one run of the CRUD API scaffolder.

    The defaults reproduce the stock ``my-crud-api`` project exactly.  The
    resource schema (the ``User`` model) is not configurable.
    """

    root_dir: Path = Field(default=Path("."), description="Directory to scaffold into")
    project_name: str = Field(
        default=DEFAULT_PROJECT_NAME,
        min_length=1,
        description="Value of the ``name`` field in package.json",
    )
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    mongo_uri: str = Field(default=DEFAULT_MONGO_URI, min_length=1)

    def template_context(self) -> dict[str, Any]:
        """Return the Jinja2 context used to render the project templates."""
        return {
            "project_name": self.project_name,
            "port": self.port,
            "mongo_uri": self.mongo_uri,
        }

    @classmethod
    def from_env(cls) -> "ScaffoldConfig":
        """Build a ``ScaffoldConfig`` from environment variables.

        Recognised variables (all optional):
            RESTCRUD_ROOT_DIR, RESTCRUD_PROJECT_NAME, RESTCRUD_PORT,
            RESTCRUD_MONGO_URI.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("RESTCRUD_ROOT_DIR"):
            kwargs["root_dir"] = Path(os.environ["RESTCRUD_ROOT_DIR"])
        if os.environ.get("RESTCRUD_PROJECT_NAME"):
            kwargs["project_name"] = os.environ["RESTCRUD_PROJECT_NAME"]
        if os.environ.get("RESTCRUD_PORT"):
            kwargs["port"] = int(os.environ["RESTCRUD_PORT"])
        if os.environ.get("RESTCRUD_MONGO_URI"):
            kwargs["mongo_uri"] = os.environ["RESTCRUD_MONGO_URI"]
        return cls(**kwargs)
