"""Jinja2 template rendering for exported projects.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``component_builder/exporter/templates/`` directory and renders them into an
in-memory :class:`~component_builder.exporter.file_tree.FileTree`. Snippet
source is only ever passed in as context values, so it is never parsed as
template syntax.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from component_builder.utils import package_name

from .file_tree import FileTree


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for exported projects.

    Templates live under one directory per output format (``static/``,
    ``nextjs/``, ``vite/``, ``astro/``) and carry a ``.j2`` suffix. Rendering
    is deterministic: the same template and context always give the same
    text.
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
        # Register custom filters
        self.env.filters["package_name"] = package_name

    # -- Single template rendering -----------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"nextjs/app/page.tsx.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    # -- File-tree rendering -----------------------------------------------

    def render_to_tree(
        self,
        tree: FileTree,
        template_path: str,
        output_path: str,
        context: dict[str, Any],
    ) -> str:
        """Render a template and store the result in *tree* at *output_path*.

        Returns the normalised output path.
        """
        content = self.render(template_path, context)
        return tree.add(output_path, content)

    def render_files(
        self,
        tree: FileTree,
        files: dict[str, str],
        context: dict[str, Any],
        *,
        prefix: str = "",
    ) -> list[str]:
        """Render a ``{template: output_path}`` mapping into *tree* in order.

        Args:
            tree: Destination file tree.
            files: Template paths (relative to *prefix*) mapped to the output
                path each one is written to.
            context: Template context variables.
            prefix: Subdirectory inside the template root holding the
                templates, typically the format directory.

        Returns:
            List of written paths.
        """
        written: list[str] = []
        for template_name, output_path in files.items():
            template_key = f"{prefix}/{template_name}" if prefix else template_name
            written.append(self.render_to_tree(tree, template_key, output_path, context))
        return written

    # -- Utility -----------------------------------------------------------

    def list_templates(self, prefix: str = "") -> list[str]:
        """Return a sorted list of all ``.j2`` template paths under *prefix*.

        Paths are relative to the template root directory.
        """
        search_dir = self.template_dir / prefix if prefix else self.template_dir
        if not search_dir.is_dir():
            return []
        return sorted(
            p.relative_to(self.template_dir).as_posix()
            for p in search_dir.rglob("*.j2")
        )
