"""Component Builder export engine -- turns a snippet selection into a project.

Four emitters share one ``Emitter`` contract and produce an in-memory
``FileTree``; ``ArchivePackager`` zips the tree and ``ExportService`` ties the
steps together behind a single ``export`` call.

Quick usage::

    from component_builder.catalog import default_catalog
    from component_builder.exporter import ExportService
    from component_builder.selection import Selection

    catalog = default_catalog()
    selection = Selection(catalog.resolve(["navbar-simple", "hero-split"]))
    service = ExportService()
    ok = await service.export(selection.to_context("nextjs"))
"""

from component_builder.exporter.astro import AstroEmitter
from component_builder.exporter.base import Emitter, component_name
from component_builder.exporter.file_tree import FileTree
from component_builder.exporter.nextjs import NextJsEmitter
from component_builder.exporter.packager import (
    ArchiveError,
    ArchivePackager,
    ExportError,
    SaveError,
)
from component_builder.exporter.registry import EMITTERS, archive_name_for, get_emitter
from component_builder.exporter.service import ExportService
from component_builder.exporter.static_site import StaticSiteEmitter
from component_builder.exporter.templates import TemplateRenderer
from component_builder.exporter.vite_react import ViteReactEmitter

__all__ = [
    "EMITTERS",
    "ArchiveError",
    "ArchivePackager",
    "AstroEmitter",
    "Emitter",
    "ExportError",
    "ExportService",
    "FileTree",
    "NextJsEmitter",
    "SaveError",
    "StaticSiteEmitter",
    "TemplateRenderer",
    "ViteReactEmitter",
    "archive_name_for",
    "component_name",
    "get_emitter",
]
