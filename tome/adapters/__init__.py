"""Format adapters that turn file bytes into display lines."""

from tome.adapters.md import MdAdapter
from tome.adapters.protocols import TextAdapter
from tome.adapters.registry import (
    AdapterRegistry,
    UnsupportedFormatError,
    extension_of,
)
from tome.adapters.txt import TxtAdapter


def default_registry() -> AdapterRegistry:
    """Create a registry with the built-in adapters, falling back to plain text."""
    registry = AdapterRegistry(fallback="txt")
    registry.register(TxtAdapter())
    registry.register(MdAdapter())
    return registry


__all__ = [
    "AdapterRegistry",
    "MdAdapter",
    "TextAdapter",
    "TxtAdapter",
    "UnsupportedFormatError",
    "default_registry",
    "extension_of",
]
