"""Component Builder configuration.

Centralised, typed configuration for exports. All settings use Pydantic v2
models so they can be validated at construction time and serialised to/from
JSON or environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class FileKey(str, Enum):
    """Which snippet attribute names the emitted component files.

    ``CATEGORY`` reproduces the historical behaviour where two snippets of the
    same category collapse into one file. ``ID`` gives every snippet its own
    file.
    """
    CATEGORY = "category"
    ID = "id"


class ExportFormat(str, Enum):
    """Target project shapes an export can produce."""
    STATIC = "static"
    SERVER_COMPONENT = "server-component-framework"
    CLIENT_BUNDLED = "client-bundled-framework"
    FILE_ROUTING = "file-based-routing-framework"

    @classmethod
    def parse(cls, value: "str | ExportFormat") -> "ExportFormat":
        """Resolve a format selector or one of its short aliases.

        Examples::

            ExportFormat.parse("static")  -> ExportFormat.STATIC
            ExportFormat.parse("nextjs")  -> ExportFormat.SERVER_COMPONENT
            ExportFormat.parse("Astro")   -> ExportFormat.FILE_ROUTING

        Raises:
            ValueError: If *value* names no known format.
        """
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        if key in FORMAT_ALIASES:
            return FORMAT_ALIASES[key]
        return cls(key)


FORMAT_ALIASES: dict[str, ExportFormat] = {
    "html": ExportFormat.STATIC,
    "nextjs": ExportFormat.SERVER_COMPONENT,
    "next": ExportFormat.SERVER_COMPONENT,
    "vite": ExportFormat.CLIENT_BUNDLED,
    "react": ExportFormat.CLIENT_BUNDLED,
    "astro": ExportFormat.FILE_ROUTING,
}


class Config(BaseModel):
    """Global Component Builder configuration.

    Instances are typically created once by the CLI entry point and then
    passed to the ``ExportService``.
    """

    output_dir: Path = Field(default=Path("./output"), description="Where archives are saved")
    default_format: ExportFormat = Field(
        default=ExportFormat.STATIC, description="Format selector used when none is given"
    )
    key_by: FileKey = Field(
        default=FileKey.CATEGORY, description="Snippet attribute used for component file names"
    )
    project_title: str = Field(default="Your Website", min_length=1)

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path | None = None) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file. Defaults to ``<output_dir>/config.json``.

        Returns:
            The resolved path where the file was written.
        """
        target = path or (self.output_dir / "config.json")
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            CB_OUTPUT_DIR, CB_FORMAT, CB_KEY_BY, CB_PROJECT_TITLE.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("CB_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["CB_OUTPUT_DIR"])
        if os.environ.get("CB_FORMAT"):
            kwargs["default_format"] = ExportFormat.parse(os.environ["CB_FORMAT"])
        if os.environ.get("CB_KEY_BY"):
            kwargs["key_by"] = FileKey(os.environ["CB_KEY_BY"].strip().lower())
        if os.environ.get("CB_PROJECT_TITLE"):
            kwargs["project_title"] = os.environ["CB_PROJECT_TITLE"]
        return cls(**kwargs)
