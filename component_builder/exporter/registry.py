"""Format selector -> emitter lookup."""

from __future__ import annotations

from typing import Any

from component_builder.config import ExportFormat

from .astro import AstroEmitter
from .base import Emitter
from .nextjs import NextJsEmitter
from .static_site import StaticSiteEmitter
from .vite_react import ViteReactEmitter

EMITTERS: dict[ExportFormat, type[Emitter]] = {
    ExportFormat.STATIC: StaticSiteEmitter,
    ExportFormat.SERVER_COMPONENT: NextJsEmitter,
    ExportFormat.CLIENT_BUNDLED: ViteReactEmitter,
    ExportFormat.FILE_ROUTING: AstroEmitter,
}


def get_emitter(export_format: ExportFormat | str, **kwargs: Any) -> Emitter:
    """Instantiate the emitter serving *export_format*.

    Args:
        export_format: Format selector or short alias (``"nextjs"``, ...).
        **kwargs: Forwarded to the emitter constructor (``renderer``,
            ``key_by``, ``title``).

    Raises:
        ValueError: If the format is unknown.
    """
    return EMITTERS[ExportFormat.parse(export_format)](**kwargs)


def archive_name_for(export_format: ExportFormat | str) -> str:
    """Return the fixed archive file name of *export_format*."""
    return EMITTERS[ExportFormat.parse(export_format)].archive_name
