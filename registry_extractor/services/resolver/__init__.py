"""Registry field resolution."""

from registry_extractor.services.resolver.fields import FIELDS, FieldSpec
from registry_extractor.services.resolver.models import Address, ExtractedRecord, FieldMatch
from registry_extractor.services.resolver.service import FieldResolver, compose_street, resolve
from registry_extractor.services.resolver.strategies import (
    DEFAULT_STRATEGIES,
    label_pattern,
    label_same_line,
    label_then_newline,
    shape_anywhere,
)

__all__ = [
    "Address",
    "DEFAULT_STRATEGIES",
    "ExtractedRecord",
    "FIELDS",
    "FieldMatch",
    "FieldResolver",
    "FieldSpec",
    "compose_street",
    "label_pattern",
    "label_same_line",
    "label_then_newline",
    "resolve",
    "shape_anywhere",
]
