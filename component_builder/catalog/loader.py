"""Loading and lookup for the built-in snippet catalog.

The catalog ships as ``data/snippets.yaml`` next to this module. It is parsed
once, validated into :class:`~component_builder.catalog.models.Snippet`
records and never mutated afterwards.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .models import Category, Snippet

_DEFAULT_CATALOG_PATH = Path(__file__).parent / "data" / "snippets.yaml"


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class CatalogError(Exception):
    """Raised when a catalog file cannot be read or is malformed."""


class UnknownSnippetError(KeyError):
    """Raised when a snippet id is not present in the catalog."""

    def __init__(self, snippet_id: str) -> None:
        self.snippet_id = snippet_id
        super().__init__(snippet_id)

    def __str__(self) -> str:
        return f"Unknown snippet id: {self.snippet_id!r}"


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------


class Catalog:
    """Read-only, ordered collection of snippets indexed by id."""

    def __init__(self, snippets: Iterable[Snippet]) -> None:
        self._snippets: tuple[Snippet, ...] = tuple(snippets)
        self._by_id: dict[str, Snippet] = {}
        for snippet in self._snippets:
            if snippet.id in self._by_id:
                raise CatalogError(f"Duplicate snippet id in catalog: {snippet.id!r}")
            self._by_id[snippet.id] = snippet

    def __iter__(self) -> Iterator[Snippet]:
        return iter(self._snippets)

    def __len__(self) -> int:
        return len(self._snippets)

    def __contains__(self, snippet_id: object) -> bool:
        return snippet_id in self._by_id

    @property
    def ids(self) -> list[str]:
        return [s.id for s in self._snippets]

    def get(self, snippet_id: str) -> Snippet:
        """Return the snippet with *snippet_id*.

        Raises:
            UnknownSnippetError: If no such snippet exists.
        """
        try:
            return self._by_id[snippet_id]
        except KeyError:
            raise UnknownSnippetError(snippet_id) from None

    def resolve(self, snippet_ids: Iterable[str]) -> list[Snippet]:
        """Map ids to snippets, preserving the given order (and repeats)."""
        return [self.get(snippet_id) for snippet_id in snippet_ids]

    def by_category(self, category: Category | str) -> list[Snippet]:
        """Return every snippet of *category* in catalog order."""
        wanted = Category(category)
        return [s for s in self._snippets if s.category == wanted]


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


def load_catalog(path: str | Path | None = None) -> Catalog:
    """Parse and validate a YAML catalog file.

    Args:
        path: Catalog file. Defaults to the bundled ``data/snippets.yaml``.

    Raises:
        CatalogError: If the file is missing, is not a YAML list, or contains
            an invalid entry.
    """
    catalog_path = Path(path) if path is not None else _DEFAULT_CATALOG_PATH
    try:
        raw = catalog_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CatalogError(f"Cannot read catalog {catalog_path}: {exc}") from exc

    try:
        entries: Any = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise CatalogError(f"Invalid YAML in catalog {catalog_path}: {exc}") from exc

    if entries is None:
        entries = []
    if not isinstance(entries, list):
        raise CatalogError(f"Catalog {catalog_path} must contain a list of snippets")

    snippets: list[Snippet] = []
    for position, entry in enumerate(entries):
        try:
            snippets.append(Snippet.model_validate(entry))
        except ValidationError as exc:
            raise CatalogError(
                f"Invalid snippet at position {position} in {catalog_path}: {exc}"
            ) from exc
    return Catalog(snippets)


@lru_cache(maxsize=1)
def default_catalog() -> Catalog:
    """Return the bundled catalog, loading it on first use."""
    return load_catalog()
