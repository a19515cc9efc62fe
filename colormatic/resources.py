"""
Resource providers: resolve an identifier to a readable byte stream.
Providers raise OSError when a resource is unavailable; callers decide what that means.
"""
from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, Protocol

from .identifier import Identifier


class ResourceManager(Protocol):
    def open(self, id: Identifier) -> BinaryIO:
        """Open the resource for reading. Raises OSError if it cannot be opened."""
        ...


class DirectoryResourceManager:
    """Resource pack on disk: "ns:path" lives at <root>/assets/<ns>/<path>."""

    def __init__(self, root: Path | str) -> None:
        self.root = Path(root)

    def resource_path(self, id: Identifier) -> Path:
        assets = (self.root / "assets").resolve()
        path = (assets / id.namespace / id.path).resolve()
        if assets not in path.parents:
            raise FileNotFoundError(f"Resource {id} is outside {assets}")
        return path

    def open(self, id: Identifier) -> BinaryIO:
        return open(self.resource_path(id), "rb")

    def __repr__(self) -> str:
        return f"DirectoryResourceManager({str(self.root)!r})"
