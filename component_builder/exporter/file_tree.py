"""In-memory file tree produced by every emitter.

A ``FileTree`` is an insertion-ordered mapping of relative POSIX paths to text
content. Directories are implied by ``/`` separators in the paths.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping


class FileTree:
    """Ordered ``path -> content`` mapping.

    Writing a path that already exists replaces its content but keeps the
    entry at its original position.
    """

    def __init__(self, files: Mapping[str, str] | None = None) -> None:
        self._files: dict[str, str] = {}
        for path, content in (files or {}).items():
            self.add(path, content)

    # -- Mutation ----------------------------------------------------------

    def add(self, path: str, content: str) -> str:
        """Store *content* under *path* and return the normalised path."""
        key = normalize_path(path)
        self._files[key] = content
        return key

    def __setitem__(self, path: str, content: str) -> None:
        self.add(path, content)

    # -- Access ------------------------------------------------------------

    def __getitem__(self, path: str) -> str:
        return self._files[normalize_path(path)]

    def get(self, path: str, default: str | None = None) -> str | None:
        return self._files.get(normalize_path(path), default)

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, str):
            return False
        try:
            return normalize_path(path) in self._files
        except ValueError:
            return False

    def __iter__(self) -> Iterator[str]:
        return iter(self._files)

    def __len__(self) -> int:
        return len(self._files)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileTree):
            return NotImplemented
        return list(self._files.items()) == list(other._files.items())

    def __repr__(self) -> str:
        return f"FileTree({list(self._files)!r})"

    def paths(self) -> list[str]:
        return list(self._files)

    def items(self) -> list[tuple[str, str]]:
        return list(self._files.items())

    def under(self, prefix: str) -> list[str]:
        """Return the paths inside directory *prefix*, in tree order."""
        base = normalize_path(prefix).rstrip("/") + "/"
        return [p for p in self._files if p.startswith(base)]


def normalize_path(path: str) -> str:
    """Normalise a relative file path to forward-slash form.

    Examples::

        normalize_path("app/./page.tsx")   -> "app/page.tsx"
        normalize_path("./src/App.tsx")   -> "src/App.tsx"

    Raises:
        ValueError: If the path is empty or escapes the tree root.
    """
    cleaned = path.replace("\\", "/")
    parts = [part for part in cleaned.split("/") if part not in ("", ".")]
    if not parts:
        raise ValueError(f"Empty file path: {path!r}")
    if ".." in parts:
        raise ValueError(f"File path escapes the project root: {path!r}")
    return "/".join(parts)
