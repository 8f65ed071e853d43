"""Exception taxonomy for document extraction.

Only linearization can fail. Field resolution never raises: missing fields are
reported in-band through sentinel values.
"""


class ExtractionError(Exception):
    """Base class for extraction errors."""

    pass


class UnreadableDocumentError(ExtractionError):
    """No text could be extracted from the document.

    Examples: image-only scans, empty files, corrupt or encrypted PDFs.
    The caller should ask the user to try again with another file.
    """

    pass


class UnsupportedDocumentError(ExtractionError):
    """The document kind could not be determined from its MIME type or name."""

    pass


# Shown to users whenever decoding fails
RETRY_MESSAGE = (
    "Could not read any text from the file. "
    "Make sure it is a text-based PDF or a plain-text file and try again."
)
