"""ZIP packaging of emitted file trees.

``ArchivePackager.pack`` turns a :class:`FileTree` into archive bytes and
``ArchivePackager.save`` writes them to disk under the format's fixed archive
name. Packing is byte-deterministic: entries carry a fixed timestamp and fixed
permissions, so the same tree always packs to the same bytes.
"""

from __future__ import annotations

import asyncio
import contextlib
import io
import os
import zipfile
from pathlib import Path

from .file_tree import FileTree

FIXED_TIMESTAMP: tuple[int, int, int, int, int, int] = (1980, 1, 1, 0, 0, 0)
_FILE_MODE = 0o100644  # regular file, rw-r--r--
_UNIX_SYSTEM = 3


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ExportError(Exception):
    """Base class for failures scoped to a single export call."""


class ArchiveError(ExportError):
    """Raised when the archive cannot be built (or read back)."""


class SaveError(ExportError):
    """Raised when a finished archive cannot be written to its destination."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"Cannot save {path}: {message}")


# ---------------------------------------------------------------------------
# Packager
# ---------------------------------------------------------------------------


class ArchivePackager:
    """Serialises file trees to ZIP archives and saves them."""

    def __init__(self, compression: int = zipfile.ZIP_DEFLATED) -> None:
        self.compression = compression

    def pack(self, tree: FileTree) -> bytes:
        """Build a ZIP archive holding every file of *tree*, in tree order.

        Raises:
            ArchiveError: If any entry cannot be encoded or written.
        """
        buffer = io.BytesIO()
        try:
            with zipfile.ZipFile(buffer, "w", compression=self.compression) as archive:
                for path, content in tree.items():
                    info = zipfile.ZipInfo(path, date_time=FIXED_TIMESTAMP)
                    info.compress_type = self.compression
                    info.create_system = _UNIX_SYSTEM
                    info.external_attr = _FILE_MODE << 16
                    archive.writestr(info, content.encode("utf-8"))
        except (AttributeError, TypeError, UnicodeError, ValueError, zipfile.LargeZipFile) as exc:
            raise ArchiveError(f"Failed to build archive: {exc}") from exc
        return buffer.getvalue()

    def unpack(self, data: bytes) -> FileTree:
        """Read an archive produced by :meth:`pack` back into a file tree.

        Raises:
            ArchiveError: If *data* is not a readable ZIP of UTF-8 text files.
        """
        tree = FileTree()
        try:
            with zipfile.ZipFile(io.BytesIO(data)) as archive:
                for info in archive.infolist():
                    if info.is_dir():
                        continue
                    tree.add(info.filename, archive.read(info).decode("utf-8"))
        except (zipfile.BadZipFile, UnicodeDecodeError, ValueError) as exc:
            raise ArchiveError(f"Failed to read archive: {exc}") from exc
        return tree

    async def save(self, data: bytes, filename: str, output_dir: str | Path) -> Path:
        """Write *data* to ``output_dir/filename``.

        The bytes go to a temporary sibling first and are renamed into place,
        so a failed save never leaves a partial archive under the final name.

        Returns:
            Path of the saved archive.

        Raises:
            SaveError: If the directory or file cannot be written.
        """
        target = Path(output_dir) / filename
        await asyncio.to_thread(_write_atomic, target, data)
        return target


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _write_atomic(path: Path, data: bytes) -> None:
    """Synchronous helper: create parent dirs, write to a temp file, rename."""
    partial = path.with_name(path.name + ".part")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        partial.write_bytes(data)
        os.replace(partial, path)
    except OSError as exc:
        with contextlib.suppress(OSError):
            partial.unlink(missing_ok=True)
        raise SaveError(path, exc.strerror or str(exc)) from exc
