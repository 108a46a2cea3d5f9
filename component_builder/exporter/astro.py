"""Astro project emitter.

Astro components are built from the snippet's plain markup rather than its
React source. The markup attributes are rewritten by simple text replacement,
which assumes the plain-HTML spellings ``class=`` and ``onclick=``.
"""

from __future__ import annotations

from typing import Any

from component_builder.catalog.models import Snippet
from component_builder.config import ExportFormat

from .base import Emitter
from .file_tree import FileTree

ATTRIBUTE_REWRITES: tuple[tuple[str, str], ...] = (
    ("class=", "class:list="),
    ("onclick=", "@click="),
)


def to_astro_markup(markup: str) -> str:
    """Rewrite plain HTML attribute spellings to Astro binding syntax.

    Examples::

        to_astro_markup('<div class="p-4">')             -> '<div class:list="p-4">'
        to_astro_markup('<button onclick="go()">')       -> '<button @click="go()">'
    """
    for plain, bound in ATTRIBUTE_REWRITES:
        markup = markup.replace(plain, bound)
    return markup


class AstroEmitter(Emitter):
    """Emits a file-based-routing Astro 4 project."""

    format = ExportFormat.FILE_ROUTING
    archive_name = "astro-website.zip"
    template_prefix = "astro"
    static_files = {
        "src/layouts/Layout.astro.j2": "src/layouts/Layout.astro",
        "package.json.j2": "package.json",
        "astro.config.mjs.j2": "astro.config.mjs",
        "tailwind.config.mjs.j2": "tailwind.config.mjs",
        "tsconfig.json.j2": "tsconfig.json",
        "README.md.j2": "README.md",
    }

    def _emit_selection(
        self, tree: FileTree, snippets: list[Snippet], context: dict[str, Any]
    ) -> None:
        for snippet, name in zip(snippets, context["component_names"]):
            tree.add(f"src/components/{name}.astro", to_astro_markup(snippet.code.markup))

        self._render(tree, "src/pages/index.astro.j2", "src/pages/index.astro", context)
