"""Ordered snippet selection and the explicit export context.

The selection is the page being composed: insertion order is page order and
the same record may appear more than once if the caller puts it there. The
:class:`ExportContext` bundles a snapshot of the selection with the requested
format so that an export never reads shared mutable state.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from pydantic import BaseModel, Field

from component_builder.catalog.models import Snippet
from component_builder.config import ExportFormat, FileKey


class Selection:
    """Mutable, ordered list of selected snippets."""

    def __init__(self, snippets: Iterable[Snippet] = ()) -> None:
        self._items: list[Snippet] = list(snippets)

    def __iter__(self) -> Iterator[Snippet]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Snippet:
        return self._items[index]

    @property
    def snippets(self) -> tuple[Snippet, ...]:
        """Immutable snapshot of the current order."""
        return tuple(self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    def is_selected(self, snippet_id: str) -> bool:
        return any(s.id == snippet_id for s in self._items)

    def add(self, snippet: Snippet) -> None:
        """Append *snippet* to the end of the page."""
        self._items.append(snippet)

    def toggle(self, snippet: Snippet) -> bool:
        """Select *snippet* if absent, otherwise deselect every copy of it.

        Returns:
            ``True`` if the snippet is selected after the call.
        """
        if self.is_selected(snippet.id):
            self._items = [s for s in self._items if s.id != snippet.id]
            return False
        self._items.append(snippet)
        return True

    def remove(self, index: int) -> Snippet:
        """Remove and return the snippet at *index*.

        Raises:
            IndexError: If *index* is out of range.
        """
        return self._items.pop(index)

    def move(self, from_index: int, to_index: int) -> None:
        """Move the snippet at *from_index* so that it ends up at *to_index*.

        A *to_index* outside the current bounds leaves the order unchanged.
        """
        if to_index < 0 or to_index >= len(self._items):
            return
        moved = self._items.pop(from_index)
        self._items.insert(to_index, moved)

    def clear(self) -> None:
        self._items.clear()

    def to_context(
        self,
        export_format: ExportFormat | str,
        key_by: FileKey = FileKey.CATEGORY,
    ) -> "ExportContext":
        """Snapshot the selection into an :class:`ExportContext`."""
        return ExportContext(
            selection=list(self._items),
            format=ExportFormat.parse(export_format),
            key_by=key_by,
        )


class ExportContext(BaseModel):
    """Everything one export call needs, passed explicitly."""

    selection: list[Snippet] = Field(default_factory=list, description="Snippets in page order")
    format: ExportFormat = Field(default=ExportFormat.STATIC, description="Requested output shape")
    key_by: FileKey = Field(
        default=FileKey.CATEGORY, description="Snippet attribute used for component file names"
    )
