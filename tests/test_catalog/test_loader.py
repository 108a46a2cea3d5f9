"""Unit tests for catalog loading and lookup (component_builder.catalog).

Tests cover:
- The bundled catalog: ids, categories, code blobs
- Catalog lookup, resolve (order and repeats), by_category
- load_catalog error handling for unreadable or malformed files
- Snippet model validation
"""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest
from pydantic import ValidationError

from component_builder.catalog import (
    Catalog,
    CatalogError,
    Category,
    Snippet,
    UnknownSnippetError,
    default_catalog,
    load_catalog,
)

pytestmark = pytest.mark.unit


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "snippets.yaml"
    path.write_text(textwrap.dedent(text), encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Bundled catalog
# ---------------------------------------------------------------------------


class TestBundledCatalog:
    def test_ids(self, catalog):
        assert catalog.ids == [
            "navbar-simple",
            "navbar-dropdown",
            "hero-simple",
            "hero-split",
            "about-simple",
            "content-features",
            "contact-simple",
            "footer-simple",
        ]

    def test_every_category_is_represented(self, catalog):
        assert {s.category for s in catalog} == set(Category)

    def test_code_blobs_present(self, catalog):
        for snippet in catalog:
            assert snippet.code.component.strip(), snippet.id
            assert snippet.code.markup.strip(), snippet.id

    def test_client_directive_on_interactive_components(self, catalog):
        assert catalog.get("navbar-simple").code.component.startswith('"use client";')
        assert catalog.get("contact-simple").code.component.startswith('"use client";')
        assert '"use client";' not in catalog.get("footer-simple").code.component

    def test_markup_uses_plain_class_attribute(self, catalog):
        assert 'class="' in catalog.get("hero-split").code.markup
        assert "className=" not in catalog.get("hero-split").code.markup

    def test_default_catalog_is_cached(self):
        assert default_catalog() is default_catalog()

    def test_snippets_are_frozen(self, catalog):
        with pytest.raises(ValidationError):
            catalog.get("hero-simple").title = "Changed"


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------


class TestCatalogLookup:
    def test_get(self, catalog):
        snippet = catalog.get("hero-split")
        assert snippet.category is Category.HERO

    def test_contains(self, catalog):
        assert "footer-simple" in catalog
        assert "footer-fancy" not in catalog

    def test_get_unknown(self, catalog):
        with pytest.raises(UnknownSnippetError) as exc_info:
            catalog.get("footer-fancy")
        assert exc_info.value.snippet_id == "footer-fancy"
        assert str(exc_info.value) == "Unknown snippet id: 'footer-fancy'"

    def test_unknown_is_a_key_error(self, catalog):
        with pytest.raises(KeyError):
            catalog.get("nope")

    def test_resolve_keeps_order_and_repeats(self, catalog):
        ids = ["footer-simple", "hero-simple", "footer-simple"]
        assert [s.id for s in catalog.resolve(ids)] == ids

    def test_resolve_empty(self, catalog):
        assert catalog.resolve([]) == []

    def test_resolve_unknown(self, catalog):
        with pytest.raises(UnknownSnippetError):
            catalog.resolve(["hero-simple", "missing"])

    def test_by_category(self, catalog):
        assert [s.id for s in catalog.by_category("navbar")] == [
            "navbar-simple",
            "navbar-dropdown",
        ]
        assert [s.id for s in catalog.by_category(Category.FOOTER)] == ["footer-simple"]

    def test_by_unknown_category(self, catalog):
        with pytest.raises(ValueError):
            catalog.by_category("sidebar")

    def test_duplicate_ids_rejected(self, make_snippet):
        with pytest.raises(CatalogError, match="Duplicate"):
            Catalog([make_snippet("hero-a"), make_snippet("hero-a")])


# ---------------------------------------------------------------------------
# load_catalog
# ---------------------------------------------------------------------------


class TestLoadCatalog:
    def test_load_minimal(self, tmp_path: Path):
        path = _write(
            tmp_path,
            """\
            - id: hero-one
              title: Hero One
              category: hero
              code:
                component: |-
                  export default function Hero() { return null; }
                markup: |-
                  <section class="hero"></section>
            """,
        )
        catalog = load_catalog(path)
        assert len(catalog) == 1
        snippet = catalog.get("hero-one")
        assert snippet.description == ""
        assert snippet.code.markup == '<section class="hero"></section>'

    def test_extra_keys_ignored(self, tmp_path: Path):
        path = _write(
            tmp_path,
            """\
            - id: hero-one
              title: Hero One
              category: hero
              tags: [landing]
              code: {component: "x", markup: "y"}
            """,
        )
        assert "hero-one" in load_catalog(path)

    def test_empty_file(self, tmp_path: Path):
        assert len(load_catalog(_write(tmp_path, ""))) == 0

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(CatalogError, match="Cannot read catalog"):
            load_catalog(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path: Path):
        with pytest.raises(CatalogError, match="Invalid YAML"):
            load_catalog(_write(tmp_path, "- id: [unclosed\n"))

    def test_not_a_list(self, tmp_path: Path):
        with pytest.raises(CatalogError, match="must contain a list"):
            load_catalog(_write(tmp_path, "id: hero-one\n"))

    def test_invalid_entry_position(self, tmp_path: Path):
        path = _write(
            tmp_path,
            """\
            - id: hero-one
              title: Hero One
              category: hero
              code: {component: "x", markup: "y"}
            - id: sidebar-one
              title: Sidebar
              category: sidebar
              code: {component: "x", markup: "y"}
            """,
        )
        with pytest.raises(CatalogError, match="position 1"):
            load_catalog(path)

    def test_missing_code_rejected(self, tmp_path: Path):
        path = _write(
            tmp_path,
            """\
            - id: hero-one
              title: Hero One
              category: hero
            """,
        )
        with pytest.raises(CatalogError):
            load_catalog(path)


# ---------------------------------------------------------------------------
# Snippet model
# ---------------------------------------------------------------------------


class TestSnippetModel:
    def test_factory_snippet(self, make_snippet):
        snippet = make_snippet("about-test", "about")
        assert snippet.category is Category.ABOUT
        assert "about-test" in snippet.code.markup

    def test_empty_id_rejected(self):
        with pytest.raises(ValidationError):
            Snippet.model_validate(
                {"id": "", "title": "t", "category": "hero",
                 "code": {"component": "", "markup": ""}}
            )

    def test_equality_by_value(self, make_snippet):
        assert make_snippet("hero-a") == make_snippet("hero-a")
