"""
Resource providers — where profile bytes come from.

The loader only needs "open this name in this directory, or tell me it
isn't there". Providers implement that for package data and for plain
directories; tests supply in-memory ones.
"""

from __future__ import annotations

from importlib import resources
from pathlib import Path
from typing import BinaryIO, Optional, Protocol, runtime_checkable


@runtime_checkable
class ResourceProvider(Protocol):
    """Interface for opening profile resources."""

    def open(self, directory: str, name: str) -> Optional[BinaryIO]:
        """Open a resource for binary reading, or return None if missing."""
        ...


class PackageResourceProvider:
    """Reads resources shipped as data files inside a Python package."""

    def __init__(self, package: str = "langprofiles"):
        self.package = package

    def open(self, directory: str, name: str) -> Optional[BinaryIO]:
        resource = resources.files(self.package).joinpath(directory).joinpath(name)
        if not resource.is_file():
            return None
        return resource.open("rb")

    def __repr__(self) -> str:
        return f"PackageResourceProvider({self.package!r})"


class DirectoryResourceProvider:
    """Reads resources from a directory tree on disk."""

    def __init__(self, root: Path):
        self.root = Path(root)

    def open(self, directory: str, name: str) -> Optional[BinaryIO]:
        path = self.root / directory / name
        if not path.is_file():
            return None
        return open(path, "rb")

    def __repr__(self) -> str:
        return f"DirectoryResourceProvider({str(self.root)!r})"
