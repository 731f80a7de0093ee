"""
Resilient text anchors.

An :class:`Anchor` remembers a selection as the selected text plus a little
context on each side. Resolving it against a later version of the document
finds the selection again after lines were inserted or removed around it,
where a raw byte offset would silently point at the wrong content.
"""

from __future__ import annotations

from enum import Enum
from typing import Self

import yaml
from pydantic import BaseModel, ConfigDict, computed_field

from tome.config import CONTEXT_WINDOW
from tome.logging_config import get_logger
from tome.models import Range
from tome.text import normalize_eol

logger = get_logger("anchors")


class AnchorStatus(str, Enum):
    """How an anchor was located in a text."""

    EXACT = "exact"
    FALLBACK = "fallback"
    LOST = "lost"


class AnchorMatch(BaseModel):
    """
    Result of locating an anchor in text.

        match = anchor.locate(text)
        if match.exact:
            select(match.range)
        elif match.found:
            select(match.range)  # context changed, first occurrence used
        else:
            drop(anchor)

    Attributes:
        status: Whether the context matched, only the target did, or neither
        range: Byte range of the located target (None when lost)
        occurrences: Number of target occurrences inspected
    """

    status: AnchorStatus
    range: Range | None = None
    occurrences: int = 0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def found(self) -> bool:
        """True if the target was located, with or without its context."""
        return self.status != AnchorStatus.LOST

    @computed_field  # type: ignore[prop-decorator]
    @property
    def exact(self) -> bool:
        """True if an occurrence with matching context was found."""
        return self.status == AnchorStatus.EXACT

    @computed_field  # type: ignore[prop-decorator]
    @property
    def lost(self) -> bool:
        """True if the target text no longer occurs."""
        return self.status == AnchorStatus.LOST


class Anchor(BaseModel):
    """
    Context-bearing pointer to a span of text.

    The anchor owns copies of its three fragments and holds no reference to
    the document it was created from.

    Example:
        anchor = Anchor.create("alpha\\nbeta\\ngamma\\n", Range(start=6, end=10))
        anchor.resolve("alpha\\nNEW\\nbeta\\ngamma\\n")  # Range(start=10, end=14)

    Attributes:
        before: Up to CONTEXT_WINDOW bytes preceding the selection
        target: The selected text itself
        after: Up to CONTEXT_WINDOW bytes following the selection
    """

    model_config = ConfigDict(frozen=True)

    before: str = ""
    target: str
    after: str = ""

    @classmethod
    def create(cls, text: str, selection: Range) -> Self:
        """
        Capture the selection ``selection`` of ``text`` as an anchor.

        Out-of-bounds and inverted ranges are clamped into the text rather
        than rejected. A boundary that falls inside a multi-byte character
        widens the selection to cover that character, and context windows
        shrink to whole characters, so every fragment is valid UTF-8.

        Args:
            text: Document text (line endings are normalized first)
            selection: Byte range into the normalized text

        Returns:
            The new Anchor
        """
        data = normalize_eol(text).encode("utf-8")
        clamped = selection.clamp(len(data))
        if clamped != selection:
            logger.debug(
                "Clamped range [%d, %d) to [%d, %d) for %d-byte text",
                selection.start,
                selection.end,
                clamped.start,
                clamped.end,
                len(data),
            )

        start = _snap_backward(data, clamped.start)
        end = _snap_forward(data, clamped.end)
        before_start = _snap_forward(data, max(0, start - CONTEXT_WINDOW))
        after_end = _snap_backward(data, min(len(data), end + CONTEXT_WINDOW))

        return cls(
            before=data[before_start:start].decode("utf-8"),
            target=data[start:end].decode("utf-8"),
            after=data[end:after_end].decode("utf-8"),
        )

    def resolve(self, text: str) -> Range | None:
        """
        Find this anchor's target in a possibly edited ``text``.

        Returns the first occurrence whose surrounding context matches, or
        else the first occurrence of the target at all; None when the target
        is empty or no longer occurs.
        """
        return self.locate(text).range

    def locate(self, text: str) -> AnchorMatch:
        """
        Find this anchor's target in ``text`` and report how it was found.

        Occurrences are scanned left to right without overlap: each search
        continues from the end of the previous occurrence.

        Args:
            text: Document text (line endings are normalized first)

        Returns:
            AnchorMatch with status EXACT, FALLBACK or LOST
        """
        if not self.target:
            logger.debug("Anchor has an empty target; nothing to locate")
            return AnchorMatch(status=AnchorStatus.LOST)

        data = normalize_eol(text).encode("utf-8")
        target = self.target.encode("utf-8")
        before = self.before.encode("utf-8")
        after = self.after.encode("utf-8")

        fallback: Range | None = None
        occurrences = 0
        search_start = 0

        while True:
            pos = data.find(target, search_start)
            if pos == -1:
                break
            end = pos + len(target)
            occurrences += 1

            before_ok = data[max(0, pos - len(before)) : pos] == before
            after_ok = data[end : end + len(after)] == after
            if before_ok and after_ok:
                logger.debug(
                    "Anchor matched with context at [%d, %d) (occurrence %d)",
                    pos,
                    end,
                    occurrences,
                )
                return AnchorMatch(
                    status=AnchorStatus.EXACT,
                    range=Range(start=pos, end=end),
                    occurrences=occurrences,
                )

            if fallback is None:
                fallback = Range(start=pos, end=end)
            search_start = end

        if fallback is not None:
            logger.debug(
                "Context not found in %d occurrence(s); falling back to [%d, %d)",
                occurrences,
                fallback.start,
                fallback.end,
            )
            return AnchorMatch(
                status=AnchorStatus.FALLBACK, range=fallback, occurrences=occurrences
            )

        logger.debug("Anchor target %r not found", self.target)
        return AnchorMatch(status=AnchorStatus.LOST)

    @classmethod
    def from_yaml(cls, yaml_text: str) -> Self:
        """
        Load an anchor from YAML.

        Accepts either the bare ``before``/``target``/``after`` mapping or a
        document with that mapping under an ``anchor`` key, as written by
        :func:`tome.storage.yaml_writer.dump_anchor`.

        Raises:
            ValueError: If the YAML is not a mapping or the fields are invalid
        """
        data = yaml.safe_load(yaml_text) or {}
        if not isinstance(data, dict):
            raise ValueError("anchor file must contain a mapping")
        if "anchor" in data:
            data = data["anchor"]
        return cls.model_validate(data)

    def to_dict(self) -> dict[str, str]:
        """Return the three fragments as a plain dictionary."""
        return {"before": self.before, "target": self.target, "after": self.after}


def _is_continuation(byte: int) -> bool:
    return byte & 0xC0 == 0x80


def _snap_backward(data: bytes, pos: int) -> int:
    """Move ``pos`` back to the first byte of the character it falls in."""
    while 0 < pos < len(data) and _is_continuation(data[pos]):
        pos -= 1
    return pos


def _snap_forward(data: bytes, pos: int) -> int:
    """Move ``pos`` forward past the rest of the character it falls in."""
    while pos < len(data) and _is_continuation(data[pos]):
        pos += 1
    return pos
