"""Whitespace normalization shared by PDF and plain-text input."""

import re

from registry_extractor.exceptions import UnreadableDocumentError

_HORIZONTAL_WS = re.compile(r"[^\S\n]+")
_LINE_EDGE_SPACES = re.compile(r" *\n *")
_BLANK_LINES = re.compile(r"\n{2,}")


def normalize_text(text: str) -> str:
    """Regularize whitespace while keeping one line break per visual line.

    Turns CRLF and lone CR into line breaks, collapses any other whitespace
    run within a line (Unicode spaces included) to a single space, strips
    spaces around line breaks and collapses blank lines.

    Raises:
        UnreadableDocumentError: if nothing but whitespace is left
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = _HORIZONTAL_WS.sub(" ", text)
    text = _LINE_EDGE_SPACES.sub("\n", text)
    text = _BLANK_LINES.sub("\n", text)
    text = text.strip()

    if not text:
        raise UnreadableDocumentError("Document contains no extractable text")
    return text
