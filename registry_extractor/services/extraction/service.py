"""Extraction pipeline: linearize a document, then resolve its fields."""

import logging
from pathlib import PurePath

from registry_extractor.enums import DocumentKind
from registry_extractor.exceptions import UnsupportedDocumentError
from registry_extractor.services.extraction.models import ExtractionResult
from registry_extractor.services.linearizer import LinearizerService, PdfDecoderConfig
from registry_extractor.services.resolver import FieldResolver

logger = logging.getLogger(__name__)


class ExtractionService:
    """Unified extraction service for PDF and plain-text registry documents."""

    PDF_MIMETYPES = {
        "application/pdf",
    }

    TEXT_MIMETYPES = {
        "text/plain",
        "text/javascript",
        "application/javascript",
        "application/typescript",
    }

    PDF_EXTENSIONS = {".pdf"}
    TEXT_EXTENSIONS = {".txt", ".js", ".tsx"}

    def __init__(
        self,
        decoder_config: PdfDecoderConfig | None = None,
        resolver: FieldResolver | None = None,
    ):
        self.linearizer = LinearizerService(decoder_config)
        self.resolver = resolver or FieldResolver()

    async def extract(self, content: bytes | str, kind: DocumentKind) -> ExtractionResult:
        """
        Run the whole pipeline on one document.

        Args:
            content: Raw document bytes (or decoded text for text documents)
            kind: Document kind chosen by the caller

        Returns:
            ExtractionResult with the record and the normalized text

        Raises:
            UnreadableDocumentError: if no text could be extracted
        """
        document = await self.linearizer.linearize(content, kind)
        record = self.resolver.resolve(document.text)

        logger.info(f"Extracted {kind} document ({document.page_count} pages)")
        return ExtractionResult(
            record=record,
            normalized_text=document.text,
            document_kind=kind,
            page_count=document.page_count,
        )

    def is_pdf(self, mime_type: str) -> bool:
        """Check if mime type is a PDF."""
        return mime_type in self.PDF_MIMETYPES

    def is_text(self, mime_type: str) -> bool:
        """Check if mime type is a plain-text document."""
        return mime_type in self.TEXT_MIMETYPES

    def document_kind_for(self, mime_type: str | None, filename: str | None = None) -> DocumentKind:
        """Pick the document kind from the MIME type, then from the file extension.

        Raises:
            UnsupportedDocumentError: if neither identifies a supported kind
        """
        mime_type = (mime_type or "").split(";")[0].strip().lower()
        if self.is_pdf(mime_type):
            return DocumentKind.PDF
        if self.is_text(mime_type):
            return DocumentKind.TEXT

        suffix = PurePath(filename).suffix.lower() if filename else ""
        if suffix in self.PDF_EXTENSIONS:
            return DocumentKind.PDF
        if suffix in self.TEXT_EXTENSIONS:
            return DocumentKind.TEXT

        raise UnsupportedDocumentError(
            f"Unsupported document type: {mime_type or 'unknown'} ({filename or 'no name'})"
        )
