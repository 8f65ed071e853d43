"""Data models for document linearization."""

from dataclasses import dataclass, field


@dataclass
class PositionedToken:
    """A fragment of page text with its layout position.

    ends_line is None when the decoder cannot tell where visual lines end;
    the linearizer then falls back to comparing y coordinates.
    """

    text: str
    x: float
    y: float
    ends_line: bool | None = None


@dataclass
class PageTokens:
    """Ordered tokens of one page."""

    page_number: int
    tokens: list[PositionedToken] = field(default_factory=list)


@dataclass
class LinearizedDocument:
    """Normalized text of a whole document."""

    text: str
    page_count: int = 1
