"""Document linearization services."""

from registry_extractor.services.linearizer.models import (
    LinearizedDocument,
    PageTokens,
    PositionedToken,
)
from registry_extractor.services.linearizer.normalize import normalize_text
from registry_extractor.services.linearizer.pdf import (
    PdfDecoder,
    PdfDecoderConfig,
    linearize_pages,
)
from registry_extractor.services.linearizer.service import LinearizerService, shutdown_executor
from registry_extractor.services.linearizer.text import decode_text

__all__ = [
    "LinearizedDocument",
    "LinearizerService",
    "PageTokens",
    "PdfDecoder",
    "PdfDecoderConfig",
    "PositionedToken",
    "decode_text",
    "linearize_pages",
    "normalize_text",
    "shutdown_executor",
]
