class DetectionError(Exception):
    """Base exception for all analysis-related errors."""


class InvalidInputError(DetectionError, ValueError):
    """Raised when the detector receives missing documents or algorithms."""
