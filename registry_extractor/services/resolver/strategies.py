"""Label matching strategies.

Each strategy takes the document text and a field spec and returns the first
acceptable value it finds, or None. The resolver tries them in order.
"""

import re
from functools import lru_cache

from registry_extractor.services.resolver.fields import FIELDS, FieldSpec
from registry_extractor.services.resolver.labels import any_label_pattern, label_pattern
from registry_extractor.services.resolver.models import FieldMatch

# Label, optional ":" or "-", line break, value at the start of the next line
_NEWLINE_SEPARATOR = r"[ \t]*[:\-–]?[ \t]*\r?\n[ \t]*"

# Label and value on one line need a colon, dash or at least one space between them
_SAME_LINE_SEPARATOR = r"(?:[ \t]*[:\-–][ \t]*|[ \t]+)"

_PLACEHOLDER = re.compile(r"^[\s*.\-]*$")


@lru_cache(maxsize=256)
def _compile(pattern: str) -> re.Pattern:
    return re.compile(pattern, re.IGNORECASE)


@lru_cache(maxsize=1)
def _label_heading() -> re.Pattern:
    # A known label standing alone, before a colon or dash, or before another label
    labels = any_label_pattern(label for spec in FIELDS.values() for label in spec.labels)
    return _compile(rf"^{labels}[ \t]*(?:$|[:\-–]|{labels})")


def clean_value(raw: str, spec: FieldSpec) -> str | None:
    """Trim a captured value; return None if it is empty, a placeholder or rejected.

    Values that are themselves field labels (a row of headings whose values
    sit on the next line) are rejected too.
    """
    value = raw.strip()
    if _PLACEHOLDER.match(value):
        return None
    if _label_heading().match(value):
        return None
    if spec.reject and _compile(spec.reject).search(value):
        return None
    return value


def _first_value(pattern: str, text: str, spec: FieldSpec) -> str | None:
    for match in _compile(pattern).finditer(text):
        value = clean_value(match.group("value"), spec)
        if value:
            return value
    return None


def label_then_newline(text: str, spec: FieldSpec) -> FieldMatch | None:
    """Label on its own line, value at the start of the line below."""
    for label in spec.labels:
        pattern = label_pattern(label) + _NEWLINE_SEPARATOR + f"(?P<value>{spec.value_pattern})"
        value = _first_value(pattern, text, spec)
        if value:
            return FieldMatch(value=value, strategy="label_then_newline", label=label)
    return None


def label_same_line(text: str, spec: FieldSpec) -> FieldMatch | None:
    """Label followed by an optional colon or dash and the value on the same line."""
    for label in spec.labels:
        pattern = label_pattern(label) + _SAME_LINE_SEPARATOR + f"(?P<value>{spec.value_pattern})"
        value = _first_value(pattern, text, spec)
        if value:
            return FieldMatch(value=value, strategy="label_same_line", label=label)
    return None


def shape_anywhere(text: str, spec: FieldSpec) -> FieldMatch | None:
    """A value with the field's shape anywhere in the text, label or not."""
    if not spec.shape:
        return None
    value = _first_value(f"(?P<value>{spec.shape})", text, spec)
    if value:
        return FieldMatch(value=value, strategy="shape_anywhere")
    return None


DEFAULT_STRATEGIES = (label_then_newline, label_same_line, shape_anywhere)
