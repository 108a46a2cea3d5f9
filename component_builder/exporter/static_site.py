"""Static HTML/CSS/JS site emitter.

Produces a single ``index.html`` holding every selected snippet's markup in
page order, plus a fixed stylesheet, behaviour script and README.
"""

from __future__ import annotations

from typing import Any

from component_builder.catalog.models import Snippet
from component_builder.config import ExportFormat

from .base import Emitter
from .file_tree import FileTree


class StaticSiteEmitter(Emitter):
    """Emits a plain static website using the Tailwind CDN."""

    format = ExportFormat.STATIC
    archive_name = "your-website.zip"
    template_prefix = "static"
    static_files = {
        "styles.css.j2": "styles.css",
        "script.js.j2": "script.js",
        "README.md.j2": "README.md",
    }

    def _emit_selection(
        self, tree: FileTree, snippets: list[Snippet], context: dict[str, Any]
    ) -> None:
        # Markup is concatenated verbatim, no separator and no parsing.
        self._render(tree, "index.html.j2", "index.html", context)
