"""
Pytest configuration and fixtures for tome tests
"""

import pytest

from tome.anchors import Anchor
from tome.models import Range


@pytest.fixture
def sample_text():
    """Three-line document used across anchor tests"""
    return "alpha\nbeta\ngamma\n"


@pytest.fixture
def beta_anchor(sample_text):
    """Anchor over "beta" in sample_text"""
    return Anchor.create(sample_text, Range(start=6, end=10))


@pytest.fixture
def text_file(tmp_path):
    """Factory fixture that writes a text file and returns its path.

    Usage:
        def test_example(text_file):
            path = text_file("notes.txt", "alpha\\nbeta\\n")
    """

    def _write(name: str, content: str):
        path = tmp_path / name
        path.write_bytes(content.encode("utf-8"))
        return path

    return _write
