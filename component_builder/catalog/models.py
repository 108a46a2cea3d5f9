"""Pydantic v2 models for the snippet catalog.

A snippet is one catalog entry providing two equivalent renderings of the same
visual component: a React component and plain HTML markup with an optional
companion ``<script>``.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Category(str, Enum):
    """Closed set of page-section categories."""
    NAVBAR = "navbar"
    HERO = "hero"
    ABOUT = "about"
    CONTENT = "content"
    CONTACT = "contact"
    FOOTER = "footer"


class SnippetCode(BaseModel):
    """The two source renderings of a snippet."""

    model_config = ConfigDict(frozen=True)

    component: str = Field(..., description="React/TSX component source")
    markup: str = Field(..., description="Plain HTML markup, optionally with an inline script")


class Snippet(BaseModel):
    """An immutable catalog entry."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(..., min_length=1, description="Unique, stable identifier")
    title: str = Field(..., description="Display title")
    description: str = Field(default="", description="Display description")
    category: Category = Field(..., description="Page-section category")
    thumbnail: str = Field(default="", description="Preview image reference")
    code: SnippetCode


__all__ = ["Category", "Snippet", "SnippetCode"]
