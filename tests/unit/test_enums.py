"""Tests for the enums module."""

from registry_extractor.enums import DocumentKind, SnippetFormat, WorkspaceStatus


class TestDocumentKind:
    """Tests for DocumentKind enum."""

    def test_values_are_strings(self):
        """Enum values should be strings so they serialize as-is."""
        assert DocumentKind.PDF == "pdf"
        assert DocumentKind.TEXT == "text"

    def test_all_kinds_defined(self):
        assert {k.value for k in DocumentKind} == {"pdf", "text"}


class TestWorkspaceStatus:
    """Tests for WorkspaceStatus enum."""

    def test_all_statuses_defined(self):
        statuses = {s.value for s in WorkspaceStatus}
        assert statuses == {"empty", "selected", "processing", "ready", "failed"}

    def test_str_is_value(self):
        assert str(WorkspaceStatus.READY) == "ready"


class TestSnippetFormat:
    """Tests for SnippetFormat enum."""

    def test_lookup_by_value(self):
        assert SnippetFormat("javascript") is SnippetFormat.JAVASCRIPT
        assert SnippetFormat("json") is SnippetFormat.JSON
