"""YAML writer for anchors."""

import io
from pathlib import Path

import ruamel.yaml
import yaml
from ruamel.yaml.scalarstring import DoubleQuotedScalarString, LiteralScalarString

from tome.anchors import Anchor
from tome.models import DocumentId

# Wide enough that ruamel.yaml never folds a context fragment
YAML_WIDTH = 4096

# Line breaks a YAML 1.1 reader would fold into "\n" inside a block scalar
YAML_11_BREAKS = ("\r", "\x85", "\u2028", "\u2029")


def _format_fragment(text: str) -> DoubleQuotedScalarString | LiteralScalarString:
    """Use a literal block scalar for multiline fragments.

    Fragments starting with whitespace would need an indentation indicator
    and stay quoted. ruamel.yaml itself falls back to a quoted style when a
    block cannot represent the text (trailing spaces, control characters).
    NEL, LINE SEPARATOR and PARAGRAPH SEPARATOR are line breaks in YAML 1.1
    block scalars, so fragments holding them stay quoted as well.
    Everything else is double-quoted so YAML 1.1 readers such as PyYAML never
    turn "yes" or "2025-01-01" into a bool or a date.
    """
    if (
        "\n" in text
        and not any(ch in text for ch in YAML_11_BREAKS)
        and not text[0].isspace()
    ):
        return LiteralScalarString(text)
    return DoubleQuotedScalarString(text)


def generate_anchor_dict(anchor: Anchor, document_id: DocumentId | None = None) -> dict:
    """Generate a dictionary for an anchor, optionally tied to a document.

    Args:
        anchor: The anchor to convert
        document_id: Document the anchor was created on, if known

    Returns:
        Dictionary ready for YAML serialization
    """
    result: dict = {}
    if document_id is not None:
        result["document"] = DoubleQuotedScalarString(str(document_id))
    result["anchor"] = {
        key: _format_fragment(value) for key, value in anchor.to_dict().items()
    }
    return result


def dump_anchor(anchor: Anchor, document_id: DocumentId | None = None) -> str:
    """Render an anchor as a YAML document.

    The result loads back with :meth:`tome.anchors.Anchor.from_yaml` into an
    equal anchor.
    """
    writer = ruamel.yaml.YAML()
    writer.default_flow_style = False
    writer.indent(mapping=2, sequence=4, offset=2)
    writer.width = YAML_WIDTH
    writer.explicit_start = True

    buffer = io.StringIO()
    writer.dump(generate_anchor_dict(anchor, document_id), buffer)
    return buffer.getvalue()


def load_document_id(yaml_text: str) -> DocumentId | None:
    """Read the ``document`` field of a YAML anchor file, if present."""
    data = yaml.safe_load(yaml_text) or {}
    if not isinstance(data, dict):
        raise ValueError("anchor file must contain a mapping")
    raw = data.get("document")
    if raw is None:
        return None
    return DocumentId.parse(str(raw))


def save_anchor(
    anchor: Anchor,
    output_file: Path,
    document_id: DocumentId | None = None,
) -> Path:
    """Save an anchor as a YAML file.

    Args:
        anchor: The anchor to save
        output_file: Destination path (parent directories are created)
        document_id: Document the anchor was created on, if known

    Returns:
        Path to the saved file
    """
    output_file.parent.mkdir(parents=True, exist_ok=True)

    # Write with Unix line endings
    with open(output_file, "w", encoding="utf-8", newline="\n") as f:
        f.write(dump_anchor(anchor, document_id))

    return output_file
