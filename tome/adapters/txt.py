"""Plain text adapter."""

from tome.text import decode_bytes, to_lines


class TxtAdapter:
    """Shows plain text files line by line."""

    @property
    def name(self) -> str:
        return "txt"

    @property
    def extensions(self) -> tuple[str, ...]:
        return ("txt", "text", "log")

    def render_lines(self, data: bytes) -> list[str]:
        return to_lines(decode_bytes(data))
