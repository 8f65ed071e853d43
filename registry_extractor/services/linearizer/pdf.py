"""PDF decoding and line reconstruction using PyMuPDF."""

import logging
from dataclasses import dataclass

import fitz  # PyMuPDF

from registry_extractor.exceptions import UnreadableDocumentError
from registry_extractor.services.linearizer.models import PageTokens, PositionedToken

logger = logging.getLogger(__name__)

PAGE_SEPARATOR = "\n\n"


@dataclass(frozen=True)
class PdfDecoderConfig:
    """Settings for one PDF decoder instance.

    use_line_flags: mark the last word of each PyMuPDF line as ending a visual
        line. When False, tokens carry no flag and lines are rebuilt from y deltas.
    line_break_threshold: y distance (points) above which two unflagged tokens
        are placed on different lines.
    password: tried when the document is encrypted.
    """

    use_line_flags: bool = True
    line_break_threshold: float = 5.0
    password: str = ""


class PdfDecoder:
    """Decode a PDF byte stream into positioned tokens, page by page."""

    def __init__(self, config: PdfDecoderConfig | None = None):
        self.config = config or PdfDecoderConfig()

    def decode(self, content: bytes) -> list[PageTokens]:
        """
        Open a PDF and return the words of every page in reading order.

        Args:
            content: Raw PDF bytes

        Returns:
            One PageTokens per page

        Raises:
            UnreadableDocumentError: if the bytes are not a PDF or it cannot be decrypted
        """
        try:
            doc = fitz.open(stream=content, filetype="pdf")
        except (RuntimeError, ValueError) as e:
            raise UnreadableDocumentError(f"Could not open PDF: {e}") from e

        try:
            if doc.is_encrypted and not doc.authenticate(self.config.password):
                raise UnreadableDocumentError("PDF is encrypted")

            return [self._page_tokens(page, index + 1) for index, page in enumerate(doc)]
        finally:
            doc.close()

    def _page_tokens(self, page, page_number: int) -> PageTokens:
        # w = (x0, y0, x1, y1, "word", block_no, line_no, word_no)
        words = page.get_text("words")
        tokens: list[PositionedToken] = []

        for index, w in enumerate(words):
            ends_line = None
            if self.config.use_line_flags:
                is_last = index == len(words) - 1
                ends_line = is_last or (words[index + 1][5], words[index + 1][6]) != (w[5], w[6])

            tokens.append(PositionedToken(text=w[4], x=w[0], y=w[3], ends_line=ends_line))

        logger.debug(f"Page {page_number}: {len(tokens)} tokens")
        return PageTokens(page_number=page_number, tokens=tokens)


def linearize_pages(pages: list[PageTokens], line_break_threshold: float = 5.0) -> str:
    """Join page tokens into text with one line per visual line.

    A line ends after a token flagged ends_line. Tokens without a flag start a
    new line when their y differs from the previous token's by more than
    line_break_threshold. Pages are separated by a blank line.
    """
    page_texts = []

    for page in pages:
        lines: list[str] = []
        current: list[str] = []
        previous_y: float | None = None

        for token in page.tokens:
            if not token.text.strip():
                if token.ends_line and current:
                    lines.append(" ".join(current))
                    current = []
                continue

            if (
                token.ends_line is None
                and current
                and previous_y is not None
                and abs(token.y - previous_y) > line_break_threshold
            ):
                lines.append(" ".join(current))
                current = []

            current.append(token.text)
            previous_y = token.y

            if token.ends_line:
                lines.append(" ".join(current))
                current = []

        if current:
            lines.append(" ".join(current))
        page_texts.append("\n".join(lines))

    return PAGE_SEPARATOR.join(page_texts)
