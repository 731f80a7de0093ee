"""Serialized forms of anchors and document ids."""

from tome.storage.yaml_writer import dump_anchor, load_document_id, save_anchor

__all__ = ["dump_anchor", "load_document_id", "save_anchor"]
