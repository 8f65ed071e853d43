"""Linearization of PDF and plain-text documents into normalized text."""

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor

from registry_extractor.config import settings
from registry_extractor.enums import DocumentKind
from registry_extractor.exceptions import UnsupportedDocumentError
from registry_extractor.services.linearizer.models import LinearizedDocument
from registry_extractor.services.linearizer.normalize import normalize_text
from registry_extractor.services.linearizer.pdf import (
    PdfDecoder,
    PdfDecoderConfig,
    linearize_pages,
)
from registry_extractor.services.linearizer.text import decode_text

logger = logging.getLogger(__name__)

# Thread pool for blocking PDF decoding
_executor = ThreadPoolExecutor(max_workers=settings.decode_workers)


def default_decoder_config() -> PdfDecoderConfig:
    """Build the decoder configuration from application settings."""
    return PdfDecoderConfig(
        use_line_flags=settings.use_pdf_line_flags,
        line_break_threshold=settings.line_break_threshold,
    )


class LinearizerService:
    """Turn a raw document into normalized text with one line per visual line."""

    def __init__(self, config: PdfDecoderConfig | None = None):
        self.config = config or default_decoder_config()
        self.pdf_decoder = PdfDecoder(self.config)

    async def linearize(self, content: bytes | str, kind: DocumentKind) -> LinearizedDocument:
        """
        Linearize a document of the given kind.

        Args:
            content: Raw bytes (PDF or text) or an already decoded string (text only)
            kind: Document kind chosen by the caller

        Returns:
            LinearizedDocument with the normalized text

        Raises:
            UnreadableDocumentError: if no text could be extracted
            UnsupportedDocumentError: if the kind is not supported
        """
        if kind == DocumentKind.PDF:
            loop = asyncio.get_running_loop()
            return await loop.run_in_executor(_executor, self.linearize_pdf, content)
        if kind == DocumentKind.TEXT:
            return self.linearize_text(content)
        raise UnsupportedDocumentError(f"Unsupported document kind: {kind}")

    def linearize_pdf(self, content: bytes) -> LinearizedDocument:
        """Decode a PDF and rebuild its lines. Blocking; runs in the thread pool."""
        pages = self.pdf_decoder.decode(content)
        raw_text = linearize_pages(pages, self.config.line_break_threshold)
        text = normalize_text(raw_text)

        logger.info(f"Linearized PDF: {len(pages)} pages, {len(text)} characters")
        return LinearizedDocument(text=text, page_count=len(pages))

    def linearize_text(self, content: bytes | str) -> LinearizedDocument:
        """Normalize a plain-text document."""
        text = normalize_text(decode_text(content))
        return LinearizedDocument(text=text, page_count=1)


def shutdown_executor() -> None:
    """Stop the decode thread pool, waiting for running decodes."""
    _executor.shutdown(wait=True)
