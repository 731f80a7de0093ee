"""
tome - terminal reader with resilient text anchors.

This library provides:
- Anchors that find a selection again after the document was edited
- Byte ranges and document identities for the surrounding editor
- Format adapters that turn files into display lines

Import patterns:

    # Primary API (recommended)
    from tome import Anchor, Range, DocumentId

    # Full submodule imports (for internal types)
    from tome.anchors import AnchorMatch, AnchorStatus
    from tome.adapters import default_registry

Example usage:

    from tome import Anchor, Range

    text = "alpha\\nbeta\\ngamma\\n"
    anchor = Anchor.create(text, Range(start=6, end=10))

    edited = "alpha\\nNEW\\nbeta\\ngamma\\n"
    found = anchor.resolve(edited)
    if found is not None:
        print(edited.encode()[found.start:found.end])  # b"beta"
"""

from tome.anchors import Anchor, AnchorMatch, AnchorStatus
from tome.models import DocumentId, Range
from tome.text import normalize_eol, to_lines

__version__ = "0.1.0"

# Primary public API
__all__ = [
    "Anchor",
    "AnchorMatch",
    "AnchorStatus",
    "DocumentId",
    "Range",
    "normalize_eol",
    "to_lines",
]
