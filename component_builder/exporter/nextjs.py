"""Next.js (App Router) project emitter.

Each selected snippet's React component is written to ``components/`` under a
category-derived name, and ``app/page.tsx`` imports and renders them in page
order. Layout, design tokens and tool configuration are constant templates.
"""

from __future__ import annotations

from typing import Any

from component_builder.catalog.models import Snippet
from component_builder.config import ExportFormat

from .base import Emitter
from .file_tree import FileTree


class NextJsEmitter(Emitter):
    """Emits a server-component style Next.js 14 project."""

    format = ExportFormat.SERVER_COMPONENT
    archive_name = "nextjs-website.zip"
    template_prefix = "nextjs"
    static_files = {
        "app/layout.tsx.j2": "app/layout.tsx",
        "app/globals.css.j2": "app/globals.css",
        "components/ui/theme-provider.tsx.j2": "components/ui/theme-provider.tsx",
        "tailwind.config.js.j2": "tailwind.config.js",
        "package.json.j2": "package.json",
        "postcss.config.js.j2": "postcss.config.js",
        "tsconfig.json.j2": "tsconfig.json",
        "next.config.js.j2": "next.config.js",
        "README.md.j2": "README.md",
    }

    def _emit_selection(
        self, tree: FileTree, snippets: list[Snippet], context: dict[str, Any]
    ) -> None:
        # Same-name components overwrite each other: the last one wins.
        for snippet, name in zip(snippets, context["component_names"]):
            tree.add(f"components/{name}.tsx", snippet.code.component)

        self._render(tree, "app/page.tsx.j2", "app/page.tsx", context)
