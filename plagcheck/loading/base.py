from abc import ABC, abstractmethod
from pathlib import Path
from typing import ClassVar


class BaseTextExtractor(ABC):
    """Contract for all file text extraction adapters."""

    EXTENSIONS: ClassVar[frozenset[str]] = frozenset()

    def can_extract(self, path: Path) -> bool:
        return path.suffix.lower() in self.EXTENSIONS

    @abstractmethod
    def extract(self, path: Path) -> str:
        """Extract plain text from the file at *path*.

        Raises:
            ExtractionError: if extraction fails for any reason.
        """
