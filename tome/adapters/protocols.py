"""Protocol definitions for format adapters."""

from __future__ import annotations

from typing import Protocol


class TextAdapter(Protocol):
    """Protocol for format adapters.

    An adapter turns the raw bytes of a file into the ordered display lines
    shown by the reader. Adapters are selected by file extension through an
    :class:`tome.adapters.registry.AdapterRegistry`.
    """

    @property
    def name(self) -> str:
        """Return the short adapter name (e.g., "txt")."""
        ...

    @property
    def extensions(self) -> tuple[str, ...]:
        """Return the file extensions handled, lowercase without leading dot."""
        ...

    def render_lines(self, data: bytes) -> list[str]:
        """Convert raw file bytes into display lines.

        Args:
            data: The file contents

        Returns:
            Display lines without line terminators
        """
        ...
