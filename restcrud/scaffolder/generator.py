"""CRUD API scaffolding orchestrator.

Takes a ``ScaffoldConfig`` and lays down an Express + Mongoose project with
a single ``User`` resource: the folder skeleton, ``app.js``, ``.env``,
``package.json``, the model, the controller, and the router.

Every step is a plain blocking file-system call made in a fixed order.
Errors from the file system are not caught, so an interrupted run leaves a
partially scaffolded directory behind.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from restcrud.config import ScaffoldConfig
from restcrud.utils import (
    mkdir_if_missing,
    print_step,
    save_json,
    touch_if_missing,
)

from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Project layout
# ---------------------------------------------------------------------------

FOLDERS: tuple[str, ...] = ("controllers", "models", "routes", "middleware", "config")

TOP_LEVEL_FILES: tuple[str, ...] = ("app.js", "package.json", ".env")

# Template name -> (output path, label used in the progress line)
TEMPLATE_OUTPUTS: dict[str, tuple[str, str]] = {
    "app.js.j2": ("app.js", "app.js"),
    "dotenv.j2": (".env", ".env"),
    "models/user.js.j2": ("models/user.js", "user model"),
    "controllers/userController.js.j2": (
        "controllers/userController.js",
        "user controller",
    ),
    "routes/userRoutes.js.j2": ("routes/userRoutes.js", "user routes"),
}

PACKAGE_VERSION = "1.0.0"
PACKAGE_DESCRIPTION = "A basic Express CRUD API"
PACKAGE_DEPENDENCIES: dict[str, str] = {
    "express": "^4.17.1",
    "mongoose": "^5.9.10",
    "bodyParser": "^1.19.0",
}

SUCCESS_MESSAGE = "Project structure with full CRUD API created successfully."


# ---------------------------------------------------------------------------
# Run report
# ---------------------------------------------------------------------------


class ScaffoldReport(BaseModel):
    """What a single ``generate`` call did, in order."""

    root: Path
    created_dirs: list[str] = Field(default_factory=list)
    created_files: list[str] = Field(default_factory=list)
    written_files: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class CrudApiGenerator:
    """Scaffolds the ``my-crud-api`` Express project.

    Given a ``ScaffoldConfig``, writes:
    - ``controllers/``, ``models/``, ``routes/``, ``middleware/``, ``config/``
    - ``app.js`` (server entry point) and ``.env``
    - ``package.json``
    - ``models/user.js``, ``controllers/userController.js``,
      ``routes/userRoutes.js``
    """

    def __init__(self, config: ScaffoldConfig | None = None) -> None:
        self.config = config or ScaffoldConfig()
        self.renderer = TemplateRenderer()

    # -- Public API --------------------------------------------------------

    def generate(self, root_dir: str | Path | None = None) -> ScaffoldReport:
        """Generate the project into *root_dir*.

        Args:
            root_dir: Target directory.  Defaults to ``config.root_dir``.
                Created (with parents) if it does not exist.

        Returns:
            A ``ScaffoldReport`` describing what was created and written.

        Raises:
            OSError: Any failure from the underlying file system, unchanged.
        """
        root = Path(root_dir) if root_dir is not None else self.config.root_dir
        root.mkdir(parents=True, exist_ok=True)
        report = ScaffoldReport(root=root)
        context = self._build_context()

        # 1. Folder skeleton
        self._create_folders(root, report)

        # 2. Empty top-level files
        self._create_files(root, report)

        # 3. app.js and .env
        for template_name in ("app.js.j2", "dotenv.j2"):
            self._render(template_name, root, context, report)

        # 4. package.json
        save_json(self._package_manifest(), root / "package.json")
        report.written_files.append("package.json")
        print_step("Added content to package.json")

        # 5. Model, controller, router
        for template_name in (
            "models/user.js.j2",
            "controllers/userController.js.j2",
            "routes/userRoutes.js.j2",
        ):
            self._render(template_name, root, context, report)

        print_step(f"\n{SUCCESS_MESSAGE}")
        return report

    # -- Context building --------------------------------------------------

    def _build_context(self) -> dict[str, Any]:
        """Build the Jinja2 template context from the config."""
        return self.config.template_context()

    def _package_manifest(self) -> dict[str, Any]:
        """Return the ``package.json`` object, keys in output order."""
        return {
            "name": self.config.project_name,
            "version": PACKAGE_VERSION,
            "description": PACKAGE_DESCRIPTION,
            "main": "app.js",
            "scripts": {"start": "node app.js"},
            "dependencies": dict(PACKAGE_DEPENDENCIES),
        }

    # -- Steps -------------------------------------------------------------

    def _create_folders(self, root: Path, report: ScaffoldReport) -> None:
        for folder in FOLDERS:
            if mkdir_if_missing(root / folder):
                report.created_dirs.append(folder)
                print_step(f"Created folder: {folder}")

    def _create_files(self, root: Path, report: ScaffoldReport) -> None:
        for name in TOP_LEVEL_FILES:
            if touch_if_missing(root / name):
                report.created_files.append(name)
                print_step(f"Created file: {name}")

    def _render(
        self,
        template_name: str,
        root: Path,
        context: dict[str, Any],
        report: ScaffoldReport,
    ) -> None:
        output_name, label = TEMPLATE_OUTPUTS[template_name]
        self.renderer.render_to_file(template_name, root / output_name, context)
        report.written_files.append(output_name)
        print_step(f"Added content to {label}")


def generate_crud_api(root_dir: str | Path = ".") -> ScaffoldReport:
    """Scaffold the default ``my-crud-api`` project into *root_dir*."""
    return CrudApiGenerator().generate(root_dir)
