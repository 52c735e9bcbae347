class ExtractionError(Exception):
    """Base exception for all text extraction errors."""


class UnsupportedFileTypeError(ExtractionError):
    """Raised when no extractor handles a file's extension."""


class PdfExtractionError(ExtractionError):
    """Raised when text cannot be extracted from a PDF file."""
