"""Markdown adapter.

Markdown is shown as its source text for now; headings, emphasis and links
are not rendered.
"""

from tome.text import decode_bytes, to_lines


class MdAdapter:
    """Shows Markdown files as plain text lines."""

    @property
    def name(self) -> str:
        return "md"

    @property
    def extensions(self) -> tuple[str, ...]:
        return ("md", "markdown")

    def render_lines(self, data: bytes) -> list[str]:
        return to_lines(decode_bytes(data))
