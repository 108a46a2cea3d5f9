"""Shared pytest fixtures for the Component Builder test suite.

Provides reusable fixtures for:
- The bundled snippet catalog and hand-built snippet records
- Sample selections (the navbar/hero/footer page, a hero collision)
- A template renderer and export configuration rooted in tmp_path
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest

from component_builder.catalog import Catalog, Snippet, default_catalog
from component_builder.config import Config
from component_builder.exporter import TemplateRenderer


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

@pytest.fixture
def catalog() -> Catalog:
    """The bundled catalog loaded from ``catalog/data/snippets.yaml``."""
    return default_catalog()


@pytest.fixture
def make_snippet() -> Callable[..., Snippet]:
    """Factory for small snippet records with predictable code blobs."""

    def _make(
        snippet_id: str = "hero-test",
        category: str = "hero",
        *,
        component: str | None = None,
        markup: str | None = None,
        **extra: Any,
    ) -> Snippet:
        return Snippet.model_validate(
            {
                "id": snippet_id,
                "title": extra.pop("title", snippet_id.replace("-", " ").title()),
                "category": category,
                "code": {
                    "component": component
                    if component is not None
                    else f"export default function C() {{ return <div>{snippet_id}</div>; }}",
                    "markup": markup
                    if markup is not None
                    else f'<section class="{category}">{snippet_id}</section>',
                },
                **extra,
            }
        )

    return _make


# ---------------------------------------------------------------------------
# Selections
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_selection(catalog: Catalog) -> list[Snippet]:
    """A typical page: navbar, hero and footer, one per category."""
    return catalog.resolve(["navbar-simple", "hero-split", "footer-simple"])


@pytest.fixture
def colliding_selection(catalog: Catalog) -> list[Snippet]:
    """Two hero variants around an about section."""
    return catalog.resolve(["hero-simple", "about-simple", "hero-split"])


# ---------------------------------------------------------------------------
# Rendering & configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


@pytest.fixture
def export_config(tmp_path: Path) -> Config:
    """Config whose archives land in a temporary directory."""
    return Config(output_dir=tmp_path / "output")


@pytest.fixture(autouse=True)
def _clean_cb_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer ``CB_*`` variables out of every test."""
    for name in ("CB_OUTPUT_DIR", "CB_FORMAT", "CB_KEY_BY", "CB_PROJECT_TITLE"):
        monkeypatch.delenv(name, raising=False)
