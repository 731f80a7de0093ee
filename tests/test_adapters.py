"""Tests for format adapters and the adapter registry."""

import pytest

from tome.adapters import (
    AdapterRegistry,
    MdAdapter,
    TxtAdapter,
    UnsupportedFormatError,
    default_registry,
    extension_of,
)


class MockAdapter:
    """Mock adapter for testing."""

    def __init__(self, name: str = "mock", extensions: tuple[str, ...] = ("mock",)) -> None:
        self._name = name
        self._extensions = extensions

    @property
    def name(self) -> str:
        return self._name

    @property
    def extensions(self) -> tuple[str, ...]:
        return self._extensions

    def render_lines(self, data: bytes) -> list[str]:
        return ["mock"]


class TestTxtAdapter:
    """Tests for TxtAdapter."""

    def test_splits_lines(self) -> None:
        assert TxtAdapter().render_lines(b"a\r\nb\nc") == ["a", "b", "c"]

    def test_invalid_utf8_is_replaced(self) -> None:
        assert TxtAdapter().render_lines(b"ok\n\xff\n") == ["ok", "�"]

    def test_metadata(self) -> None:
        adapter = TxtAdapter()
        assert adapter.name == "txt"
        assert adapter.extensions == ("txt", "text", "log")


class TestMdAdapter:
    """Tests for MdAdapter."""

    def test_handles_markdown_as_text(self) -> None:
        assert MdAdapter().render_lines(b"# Title\npara") == ["# Title", "para"]

    def test_metadata(self) -> None:
        adapter = MdAdapter()
        assert adapter.name == "md"
        assert adapter.extensions == ("md", "markdown")


class TestAdapterRegistry:
    """Tests for AdapterRegistry class."""

    def test_register_and_get(self) -> None:
        """Test registering and retrieving an adapter."""
        registry = AdapterRegistry()
        adapter = MockAdapter()
        registry.register(adapter)

        assert registry.get("mock") is adapter

    def test_get_normalizes_extension(self) -> None:
        registry = AdapterRegistry()
        adapter = MockAdapter()
        registry.register(adapter)

        assert registry.get(".MOCK") is adapter

    def test_get_returns_none_for_unregistered(self) -> None:
        assert AdapterRegistry().get("pdf") is None

    def test_require_raises_for_unregistered(self) -> None:
        with pytest.raises(UnsupportedFormatError) as exc_info:
            AdapterRegistry().require(".PDF")
        assert exc_info.value.extension == "pdf"

    def test_later_registration_replaces_extension(self) -> None:
        registry = AdapterRegistry()
        first = MockAdapter("first", ("txt",))
        second = MockAdapter("second", ("txt",))
        registry.register(first)
        registry.register(second)

        assert registry.get("txt") is second
        assert registry.by_name("first") is first

    def test_names_and_extensions(self) -> None:
        registry = default_registry()
        assert registry.names() == ["txt", "md"]
        assert registry.extensions() == {"txt", "text", "log", "md", "markdown"}

    def test_adapter_for_path(self) -> None:
        registry = default_registry()
        assert registry.adapter_for_path("README.md").name == "md"
        assert registry.adapter_for_path("notes/TODO.Markdown").name == "md"
        assert registry.adapter_for_path("server.log").name == "txt"

    def test_adapter_for_path_falls_back_to_text(self) -> None:
        registry = default_registry()
        assert registry.adapter_for_path("data.csv").name == "txt"
        assert registry.adapter_for_path("Makefile").name == "txt"

    def test_adapter_for_path_without_fallback(self) -> None:
        registry = AdapterRegistry()
        registry.register(MdAdapter())

        with pytest.raises(UnsupportedFormatError) as exc_info:
            registry.adapter_for_path("doc.pdf")
        assert str(exc_info.value) == "No adapter for extension .pdf in doc.pdf"


class TestUnsupportedFormatError:
    """Tests for UnsupportedFormatError exception."""

    def test_error_message_basic(self) -> None:
        error = UnsupportedFormatError("pdf")
        assert str(error) == "No adapter for extension .pdf"

    def test_error_message_without_extension(self) -> None:
        error = UnsupportedFormatError("", path="Makefile")
        assert str(error) == "No adapter for extension (no extension) in Makefile"


class TestExtensionOf:
    """Tests for extension_of function."""

    def test_last_suffix(self) -> None:
        assert extension_of("archive.tar.gz") == "gz"

    def test_no_suffix(self) -> None:
        assert extension_of("README") == ""

    def test_uppercase(self) -> None:
        assert extension_of("NOTES.TXT") == "txt"
