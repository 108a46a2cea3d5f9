"""Common contract for every project emitter.

An emitter is a pure function from an ordered snippet selection to a
:class:`FileTree`. Subclasses differ in which selection-dependent files they
produce; the constant files of each format are rendered from templates listed
in ``static_files``.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, ClassVar

from component_builder.catalog.models import Snippet
from component_builder.config import ExportFormat, FileKey
from component_builder.utils import capitalize_first, to_pascal

from .file_tree import FileTree
from .templates import TemplateRenderer

DEFAULT_TITLE = "Your Website"
_NON_IDENTIFIER = re.compile(r"[^0-9A-Za-z]+")


def component_name(snippet: Snippet, key_by: FileKey = FileKey.CATEGORY) -> str:
    """Derive the file/symbol name a snippet is emitted under.

    Keyed by category the name is the category with its first letter
    upper-cased, so ``navbar`` becomes ``Navbar`` and every hero variant
    becomes ``Hero``. Keyed by id the name is the PascalCase id
    (``hero-split`` -> ``HeroSplit``). Characters that cannot appear in a JS
    identifier act as word separators, and a name that would be empty or start
    with a digit is prefixed with ``Snippet`` (``404-page`` -> ``Snippet404Page``).
    """
    if key_by is FileKey.ID:
        name = to_pascal(_NON_IDENTIFIER.sub("-", snippet.id))
        if not name or name[0].isdigit():
            name = f"Snippet{name}"
        return name
    return capitalize_first(snippet.category.value)


class Emitter(ABC):
    """Base class for the four project emitters.

    Attributes:
        format: Format selector this emitter serves.
        archive_name: File name the packaged archive is saved under.
        template_prefix: Template subdirectory for this format.
        static_files: Constant ``{template: output_path}`` files, rendered
            after the selection-dependent ones, in this order.
    """

    format: ClassVar[ExportFormat]
    archive_name: ClassVar[str]
    template_prefix: ClassVar[str]
    static_files: ClassVar[dict[str, str]] = {}

    def __init__(
        self,
        renderer: TemplateRenderer | None = None,
        *,
        key_by: FileKey = FileKey.CATEGORY,
        title: str = DEFAULT_TITLE,
    ) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.key_by = key_by
        self.title = title

    # -- Public API --------------------------------------------------------

    def emit(self, selection: Sequence[Snippet]) -> FileTree:
        """Build the complete project for *selection*.

        The selection is read, never modified. Calling ``emit`` twice with the
        same selection yields equal trees.
        """
        snippets = list(selection)
        context = self._build_context(snippets)
        tree = FileTree()
        self._emit_selection(tree, snippets, context)
        self.renderer.render_files(
            tree, self.static_files, context, prefix=self.template_prefix
        )
        return tree

    def component_name(self, snippet: Snippet) -> str:
        return component_name(snippet, self.key_by)

    # -- Hooks -------------------------------------------------------------

    @abstractmethod
    def _emit_selection(
        self, tree: FileTree, snippets: list[Snippet], context: dict[str, Any]
    ) -> None:
        """Add the files whose content depends on the selection."""

    def _build_context(self, snippets: list[Snippet]) -> dict[str, Any]:
        """Build the Jinja2 template context shared by all of this format's files."""
        return {
            "title": self.title,
            "snippets": snippets,
            "component_names": [self.component_name(s) for s in snippets],
        }

    def _render(
        self, tree: FileTree, template_name: str, output_path: str, context: dict[str, Any]
    ) -> str:
        return self.renderer.render_to_tree(
            tree, f"{self.template_prefix}/{template_name}", output_path, context
        )
