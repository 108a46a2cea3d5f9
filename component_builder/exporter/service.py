"""Export call site: emit, package and save one archive.

``ExportService.export`` is the single entry point the UI (or CLI) calls. It
never raises for export failures: errors are reported on the console and the
call returns ``False``. The ``in_flight`` flag is set for the duration of a
call and always cleared afterwards.
"""

from __future__ import annotations

import traceback
from pathlib import Path

from rich.markup import escape

from component_builder.config import Config
from component_builder.selection import ExportContext
from component_builder.utils import console, format_size, print_error, print_success, print_warning

from .base import Emitter
from .file_tree import FileTree
from .packager import ArchivePackager, ExportError
from .registry import get_emitter
from .templates import TemplateRenderer


class ExportService:
    """Runs exports one at a time.

    Attributes:
        config: Output directory, project title and defaults.
        packager: Archive builder/saver.
        in_flight: ``True`` while an export is running.
        last_archive: Path of the most recent successfully saved archive.
    """

    def __init__(
        self,
        config: Config | None = None,
        *,
        packager: ArchivePackager | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config or Config()
        self.packager = packager or ArchivePackager()
        self.renderer = renderer or TemplateRenderer()
        self.in_flight = False
        self.last_archive: Path | None = None

    # -- Public API --------------------------------------------------------

    def build(self, context: ExportContext) -> FileTree:
        """Emit the file tree for *context* without packaging it."""
        return self._emitter_for(context).emit(context.selection)

    async def export(self, context: ExportContext) -> bool:
        """Emit, package and save the project described by *context*.

        Returns:
            ``True`` if the archive was saved, ``False`` otherwise. A call
            made while another export is running is rejected with ``False``.
        """
        if self.in_flight:
            print_warning("An export is already in progress -- request ignored.")
            return False

        self.in_flight = True
        try:
            return await self._run(context)
        finally:
            self.in_flight = False

    # -- Internals ---------------------------------------------------------

    def _emitter_for(self, context: ExportContext) -> Emitter:
        return get_emitter(
            context.format,
            renderer=self.renderer,
            key_by=context.key_by,
            title=self.config.project_title,
        )

    async def _run(self, context: ExportContext) -> bool:
        label = context.format.value
        try:
            emitter = self._emitter_for(context)
            tree = emitter.emit(context.selection)
            data = self.packager.pack(tree)
            path = await self.packager.save(data, emitter.archive_name, self.config.output_dir)

        except ExportError as exc:
            print_error(f"Error generating {label} archive: {escape(str(exc))}")
            return False

        except Exception as exc:
            tb = traceback.format_exc()
            print_error(f"Error generating {label} archive: {escape(str(exc))}")
            console.print(f"[dim]{escape(tb)}[/dim]")
            return False

        self.last_archive = path
        print_success(
            f"Saved {escape(str(path))} ({len(tree)} files, {format_size(len(data))})"
        )
        return True
