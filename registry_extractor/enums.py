"""Enums for values shared across the application."""

from enum import StrEnum


class DocumentKind(StrEnum):
    """How a document's bytes should be decoded."""

    PDF = "pdf"
    TEXT = "text"


class WorkspaceStatus(StrEnum):
    """State of a session's document workspace."""

    EMPTY = "empty"
    SELECTED = "selected"
    PROCESSING = "processing"
    READY = "ready"
    FAILED = "failed"


class SnippetFormat(StrEnum):
    """Output formats for rendered records."""

    JAVASCRIPT = "javascript"
    JSON = "json"
