"""Vite + React project emitter.

Same category-derived component files as the Next.js emitter, but under
``src/components/`` and with the client directive removed, since a
client-bundled app has no server/client split.
"""

from __future__ import annotations

from typing import Any

from component_builder.catalog.models import Snippet
from component_builder.config import ExportFormat

from .base import Emitter
from .file_tree import FileTree

CLIENT_DIRECTIVE = '"use client";'


def strip_client_directive(source: str) -> str:
    """Remove the first ``"use client";`` marker from *source*.

    Only the marker text is removed; the line break that followed it stays.
    """
    return source.replace(CLIENT_DIRECTIVE, "", 1)


class ViteReactEmitter(Emitter):
    """Emits a client-bundled Vite + React + TypeScript project."""

    format = ExportFormat.CLIENT_BUNDLED
    archive_name = "vite-react-website.zip"
    template_prefix = "vite"
    static_files = {
        "src/main.tsx.j2": "src/main.tsx",
        "src/index.css.j2": "src/index.css",
        "package.json.j2": "package.json",
        "vite.config.ts.j2": "vite.config.ts",
        "tailwind.config.js.j2": "tailwind.config.js",
        "postcss.config.js.j2": "postcss.config.js",
        "tsconfig.json.j2": "tsconfig.json",
        "tsconfig.node.json.j2": "tsconfig.node.json",
        "eslintrc.cjs.j2": ".eslintrc.cjs",
        "index.html.j2": "index.html",
        "README.md.j2": "README.md",
    }

    def _emit_selection(
        self, tree: FileTree, snippets: list[Snippet], context: dict[str, Any]
    ) -> None:
        for snippet, name in zip(snippets, context["component_names"]):
            tree.add(
                f"src/components/{name}.tsx",
                strip_client_directive(snippet.code.component),
            )

        self._render(tree, "src/App.tsx.j2", "src/App.tsx", context)
