"""Plain-text decoding."""


def decode_text(content: bytes | str) -> str:
    """Decode text file bytes, trying UTF-8 first and falling back to Latin-1."""
    if isinstance(content, str):
        return content
    try:
        return content.decode("utf-8-sig")
    except UnicodeDecodeError:
        return content.decode("latin-1")
