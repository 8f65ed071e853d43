"""Document extraction pipeline."""

from registry_extractor.services.extraction.models import ExtractionResult
from registry_extractor.services.extraction.service import ExtractionService

__all__ = [
    "ExtractionResult",
    "ExtractionService",
]
