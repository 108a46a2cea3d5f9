"""Snippet catalog: the static component records that exports are built from.

Quick usage::

    from component_builder.catalog import default_catalog

    catalog = default_catalog()
    navbar = catalog.get("navbar-simple")
"""

from component_builder.catalog.loader import (
    Catalog,
    CatalogError,
    UnknownSnippetError,
    default_catalog,
    load_catalog,
)
from component_builder.catalog.models import Category, Snippet, SnippetCode

__all__ = [
    "Catalog",
    "CatalogError",
    "Category",
    "Snippet",
    "SnippetCode",
    "UnknownSnippetError",
    "default_catalog",
    "load_catalog",
]
