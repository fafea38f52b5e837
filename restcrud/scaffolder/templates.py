"""Jinja2 template rendering for the CRUD API scaffold.

Provides the TemplateRenderer class which loads the packaged ``.j2`` files
from ``restcrud/scaffolder/templates/`` and renders them with the context
built from a ``ScaffoldConfig``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from restcrud.utils import write_text


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders the scaffold's Jinja2 templates.

    Rendered output has surrounding whitespace stripped, so every generated
    file starts at its first line of code and ends without a newline.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"models/user.js.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered content with leading and trailing whitespace removed.
        """
        template = self.env.get_template(template_path)
        return template.render(**context).strip()

    def render_to_file(
        self,
        template_path: str,
        output_path: str | Path,
        context: dict[str, Any],
    ) -> Path:
        """Render a template and write the result to *output_path*.

        The parent directory must already exist; any previous content of the
        output file is replaced.
        """
        content = self.render(template_path, context)
        return write_text(output_path, content)

    def list_templates(self) -> list[str]:
        """Return a sorted list of all ``.j2`` template paths.

        Paths are relative to the template root directory and use forward
        slashes.
        """
        if not self.template_dir.is_dir():
            return []
        return sorted(
            p.relative_to(self.template_dir).as_posix()
            for p in self.template_dir.rglob("*.j2")
        )
