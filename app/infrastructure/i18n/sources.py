"""Locale resource sources.

A resource source enumerates named text resources and opens one as a binary
stream. The catalog only relies on this interface, so locale files can come
from a directory, an installed package or memory.

Resource names are dot-delimited. A name is a locale resource when it has a
'Locales' segment and ends in '.txt'; the locale identifier is the segment
right before the extension (e.g., "App.Locales.en-US.txt" -> "en-US").
"""

import io
from abc import ABC, abstractmethod
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import BinaryIO, Dict, List, Mapping, Union

import structlog

logger = structlog.get_logger().bind(component="i18n.sources")

LOCALES_SEGMENT = "Locales"
LOCALE_EXTENSION = ".txt"


def is_locale_resource(name: str) -> bool:
    """Check whether a resource name follows the locale naming convention.

    Args:
        name: Dot-delimited resource name.

    Returns:
        True if the name has a 'Locales' segment and ends in '.txt'.
    """
    if not name.endswith(LOCALE_EXTENSION):
        return False
    parts = name.split(".")
    # The last two segments are the identifier and the extension
    return LOCALES_SEGMENT in parts[:-2]


def locale_from_resource_name(name: str) -> str:
    """Extract the locale identifier from a resource name.

    Args:
        name: Resource name (e.g., "App.Locales.fr.txt").

    Returns:
        Second-to-last dot-delimited segment (e.g., "fr").
    """
    return name.split(".")[-2]


class ResourceSource(ABC):
    """Abstract base for locale resource sources."""

    @abstractmethod
    def list_names(self) -> List[str]:
        """List all resource names available from this source.

        Returns:
            Resource names in enumeration order.
        """
        pass

    @abstractmethod
    def open(self, name: str) -> BinaryIO:
        """Open a resource as a readable binary stream.

        Args:
            name: Resource name as returned by list_names().

        Returns:
            Binary stream; the caller is responsible for closing it.

        Raises:
            FileNotFoundError: If the resource does not exist.
        """
        pass


class DirectoryResourceSource(ResourceSource):
    """Resource source backed by a filesystem directory.

    Names are dotted paths relative to the root's parent, so the root
    directory's own name is the first segment. A root at ``app/Locales``
    holding ``en.txt`` yields ``Locales.en.txt``.

    Attributes:
        root: Directory scanned recursively for files.
    """

    def __init__(self, root: Union[str, Path]):
        self.root = Path(root)
        if not self.root.is_dir():
            raise ValueError(f"Resource directory not found: {self.root}")
        self._paths: Dict[str, Path] = {}

    def list_names(self) -> List[str]:
        self._paths = {}
        for path in sorted(p for p in self.root.rglob("*") if p.is_file()):
            name = ".".join(path.relative_to(self.root.parent).parts)
            self._paths[name] = path
        logger.debug(
            "listed_directory_resources",
            root=str(self.root),
            resource_count=len(self._paths),
        )
        return list(self._paths)

    def open(self, name: str) -> BinaryIO:
        if name not in self._paths:
            self.list_names()
        path = self._paths.get(name)
        if path is None:
            raise FileNotFoundError(f"Resource not found: {name}")
        return open(path, "rb")


class PackageResourceSource(ResourceSource):
    """Resource source backed by files shipped inside a Python package.

    Names are prefixed with the package name, e.g. package ``myapp`` holding
    ``Locales/en.txt`` yields ``myapp.Locales.en.txt``.
    """

    def __init__(self, package: str):
        self.package = package
        self._files: Dict[str, Traversable] = {}

    def _walk(self, node: Traversable, prefix: str) -> None:
        for child in sorted(node.iterdir(), key=lambda c: c.name):
            name = f"{prefix}.{child.name}"
            if child.is_dir():
                self._walk(child, name)
            elif child.is_file():
                self._files[name] = child

    def list_names(self) -> List[str]:
        self._files = {}
        self._walk(resources.files(self.package), self.package)
        return list(self._files)

    def open(self, name: str) -> BinaryIO:
        if name not in self._files:
            self.list_names()
        resource = self._files.get(name)
        if resource is None:
            raise FileNotFoundError(f"Resource not found: {name}")
        return resource.open("rb")


class InMemoryResourceSource(ResourceSource):
    """Resource source holding resource contents in memory.

    Text values are encoded as UTF-8 when opened.
    """

    def __init__(self, contents: Mapping[str, Union[str, bytes]]):
        self._contents: Dict[str, bytes] = {
            name: value.encode("utf-8") if isinstance(value, str) else value
            for name, value in contents.items()
        }

    def list_names(self) -> List[str]:
        return list(self._contents)

    def open(self, name: str) -> BinaryIO:
        try:
            return io.BytesIO(self._contents[name])
        except KeyError:
            raise FileNotFoundError(f"Resource not found: {name}") from None
