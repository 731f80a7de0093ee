"""
Core value types: byte ranges and document identities.

Positions are byte offsets into the UTF-8 encoding of normalized text
(see :func:`tome.text.normalize_eol`), not character indices.
"""

from __future__ import annotations

import uuid
from typing import Self

from pydantic import UUID4, BaseModel, ConfigDict


class Range(BaseModel):
    """
    Half-open byte interval ``[start, end)``.

    Any pair of integers can be constructed so callers may pass loose input
    to :meth:`tome.anchors.Anchor.create`; ranges produced by tome itself
    always satisfy ``0 <= start <= end``.

    Attributes:
        start: First byte of the span
        end: Byte just past the span
    """

    model_config = ConfigDict(frozen=True)

    start: int
    end: int

    @property
    def length(self) -> int:
        """Number of bytes covered (0 for inverted ranges)."""
        return max(0, self.end - self.start)

    def __len__(self) -> int:
        return self.length

    @property
    def is_empty(self) -> bool:
        return self.length == 0

    def clamp(self, limit: int) -> Range:
        """Repair the range so it lies within ``[0, limit]`` and is not inverted."""
        start = min(max(self.start, 0), limit)
        end = min(max(self.end, start), limit)
        return Range(start=start, end=end)

    def slice(self, data: bytes) -> bytes:
        """Return the bytes of ``data`` covered by this range."""
        return data[self.start : self.end]

    def to_json(self) -> list[int]:
        """Serialize to a JSON-compatible ``[start, end]`` pair."""
        return [self.start, self.end]

    @classmethod
    def from_json(cls, data: list[int]) -> Self:
        """Deserialize from a ``[start, end]`` pair."""
        return cls(start=data[0], end=data[1])


class DocumentId(BaseModel):
    """
    Opaque identifier for one opened document.

    Every call to :meth:`new` draws a fresh random UUID4 from the operating
    system's random source; no generator state is shared between calls.
    """

    model_config = ConfigDict(frozen=True)

    value: UUID4

    @classmethod
    def new(cls) -> Self:
        return cls(value=uuid.uuid4())

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse the string form produced by ``str(document_id)``."""
        return cls(value=uuid.UUID(text.strip()))

    def __str__(self) -> str:
        return str(self.value)
