"""Data models for the extraction pipeline."""

from dataclasses import dataclass

from registry_extractor.enums import DocumentKind
from registry_extractor.services.resolver.models import ExtractedRecord


@dataclass(frozen=True)
class ExtractionResult:
    """Result of one extraction pass.

    normalized_text is kept verbatim for diagnostics.
    """

    record: ExtractedRecord
    normalized_text: str
    document_kind: DocumentKind
    page_count: int = 1
