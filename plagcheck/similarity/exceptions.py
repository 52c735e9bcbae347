class SimilarityError(Exception):
    """Base exception for all similarity-related errors."""


class UnknownAlgorithmError(SimilarityError, ValueError):
    """Raised when an algorithm identifier is outside the supported set."""


class SimilarityComputationError(SimilarityError):
    """Raised when an algorithm fails while scoring a pair of texts."""
