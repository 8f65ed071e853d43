#!/usr/bin/env python3
"""Extract a registry record from a local file.

Usage:
    bin/extract_document.py cartao_cnpj.pdf                   # JavaScript snippet
    bin/extract_document.py cartao_cnpj.pdf --format json     # JSON record
    bin/extract_document.py cartao_cnpj.pdf --format preview  # Human-readable preview
    bin/extract_document.py cartao_cnpj.pdf --format text     # Normalized text
    bin/extract_document.py cartao_cnpj.pdf --threshold 8 --no-line-flags
    bin/extract_document.py dados.txt --explain               # Show how each field was found
"""

import argparse
import asyncio
import logging
import mimetypes
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from registry_extractor.config import settings
from registry_extractor.enums import SnippetFormat
from registry_extractor.exceptions import RETRY_MESSAGE, ExtractionError, UnsupportedDocumentError
from registry_extractor.services.extraction import ExtractionResult, ExtractionService
from registry_extractor.services.linearizer import PdfDecoderConfig
from registry_extractor.services.rendering import render_preview_text, render_snippet

FORMATS = ["javascript", "json", "preview", "text"]


def render(result: ExtractionResult, fmt: str) -> str:
    """Render an extraction result in one of the CLI output formats."""
    if fmt == "preview":
        return render_preview_text(result.record)
    if fmt == "text":
        return result.normalized_text
    return render_snippet(result.record, SnippetFormat(fmt))


def explain(service: ExtractionService, text: str) -> str:
    """List each field with the strategy and label that produced it."""
    lines = []
    for name, match in service.resolver.trace(text).items():
        if match is None:
            lines.append(f"{name:12} -> not found")
            continue
        via = match.strategy if match.label is None else f"{match.strategy} ({match.label})"
        lines.append(f"{name:12} -> {match.value!r} via {via}")
    return "\n".join(lines)


async def run(args: argparse.Namespace) -> int:
    path = Path(args.path)
    if not path.is_file():
        print(f"ERROR: file not found: {path}", file=sys.stderr)
        return 1

    config = PdfDecoderConfig(
        use_line_flags=not args.no_line_flags and settings.use_pdf_line_flags,
        line_break_threshold=args.threshold,
    )
    service = ExtractionService(decoder_config=config)

    try:
        mime_type, _ = mimetypes.guess_type(path.name)
        kind = service.document_kind_for(mime_type, path.name)
        result = await service.extract(path.read_bytes(), kind)
    except UnsupportedDocumentError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    except ExtractionError as e:
        print(f"ERROR: {RETRY_MESSAGE} ({e})", file=sys.stderr)
        return 1

    print(render(result, args.format))
    if args.explain:
        print()
        print(explain(service, result.normalized_text))
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(description="Extract a registry record from a PDF or text file")
    parser.add_argument("path", help="PDF or plain-text document")
    parser.add_argument("--format", choices=FORMATS, default="javascript", help="Output format")
    parser.add_argument(
        "--threshold",
        type=float,
        default=settings.line_break_threshold,
        help="Line break threshold in PDF points",
    )
    parser.add_argument(
        "--no-line-flags",
        action="store_true",
        help="Rebuild lines from y coordinates only",
    )
    parser.add_argument("--explain", action="store_true", help="Show how each field was found")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
