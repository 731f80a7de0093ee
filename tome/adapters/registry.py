"""Adapter registry for mapping file extensions to format adapters."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tome.adapters.protocols import TextAdapter


class UnsupportedFormatError(Exception):
    """Raised when no adapter is registered for a file extension."""

    def __init__(self, extension: str, path: str = "") -> None:
        """Initialize the error.

        Args:
            extension: The unhandled extension (normalized, may be empty)
            path: The file being opened, if known
        """
        self.extension = extension
        shown = f".{extension}" if extension else "(no extension)"
        msg = f"No adapter for extension {shown}"
        if path:
            msg = f"{msg} in {path}"
        super().__init__(msg)


def normalize_extension(extension: str) -> str:
    """Lowercase an extension and drop a leading dot (".MD" -> "md")."""
    return extension.strip().lstrip(".").lower()


def extension_of(path: str | Path) -> str:
    """Return the normalized extension of a file path ("" if none)."""
    return normalize_extension(Path(path).suffix)


class AdapterRegistry:
    """Registry mapping file extensions to adapters.

    Adapters are registered once and indexed by every extension they list.
    A later registration for the same extension replaces the earlier one.
    """

    def __init__(self, fallback: str | None = None) -> None:
        """Initialize an empty registry.

        Args:
            fallback: Name of the adapter used for unknown extensions by
                :meth:`adapter_for_path` (None: raise instead)
        """
        self._adapters: dict[str, TextAdapter] = {}
        self._by_extension: dict[str, TextAdapter] = {}
        self._fallback = fallback

    def register(self, adapter: TextAdapter) -> None:
        """Register an adapter for all of its extensions.

        Args:
            adapter: The adapter to register
        """
        self._adapters[adapter.name] = adapter
        for extension in adapter.extensions:
            self._by_extension[normalize_extension(extension)] = adapter

    def get(self, extension: str) -> TextAdapter | None:
        """Get the adapter for an extension.

        Args:
            extension: File extension, with or without leading dot

        Returns:
            The adapter if registered, None otherwise
        """
        return self._by_extension.get(normalize_extension(extension))

    def require(self, extension: str) -> TextAdapter:
        """Get the adapter for an extension or raise.

        Raises:
            UnsupportedFormatError: If no adapter handles the extension
        """
        adapter = self.get(extension)
        if adapter is None:
            raise UnsupportedFormatError(normalize_extension(extension))
        return adapter

    def by_name(self, name: str) -> TextAdapter | None:
        """Get a registered adapter by its name."""
        return self._adapters.get(name)

    def adapter_for_path(self, path: str | Path) -> TextAdapter:
        """Pick the adapter for a file path by its extension.

        Unknown extensions use the fallback adapter when one is configured.

        Raises:
            UnsupportedFormatError: If nothing handles the extension and
                there is no fallback
        """
        extension = extension_of(path)
        adapter = self.get(extension)
        if adapter is not None:
            return adapter
        if self._fallback is not None and self._fallback in self._adapters:
            return self._adapters[self._fallback]
        raise UnsupportedFormatError(extension, path=str(path))

    def names(self) -> list[str]:
        """Return registered adapter names in registration order."""
        return list(self._adapters.keys())

    def extensions(self) -> set[str]:
        """Return set of all registered extensions."""
        return set(self._by_extension.keys())
