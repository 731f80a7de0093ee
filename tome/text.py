"""Text normalization shared by the anchor engine and the format adapters."""


def normalize_eol(text: str) -> str:
    """Collapse CR-LF line endings to LF.

    Only the two-byte ``\\r\\n`` sequence is rewritten. A lone ``\\r`` is kept
    as-is and is not treated as a line boundary anywhere in tome.
    """
    return text.replace("\r\n", "\n")


def to_lines(text: str) -> list[str]:
    """Normalize text and split it into lines without their terminators.

    A trailing ``\\n`` does not produce an extra empty line, and empty text
    has no lines at all.
    """
    return _split_lf(normalize_eol(text))


def _split_lf(text: str) -> list[str]:
    # str.splitlines() would also break on \r, \v, \x1c and friends.
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def decode_bytes(data: bytes) -> str:
    """Decode raw file bytes as UTF-8, replacing invalid sequences with U+FFFD."""
    return data.decode("utf-8", errors="replace")
