from pathlib import Path

from plagcheck.analysis.models import Document
from plagcheck.loading.base import BaseTextExtractor
from plagcheck.loading.exceptions import ExtractionError, UnsupportedFileTypeError
from plagcheck.logging.logger import Log


class DocumentLoader:
    """Resolves a directory to documents, delegating text extraction per extension."""

    def __init__(self, extractors: list[BaseTextExtractor]) -> None:
        self._extractors = extractors

    def load_directory(self, directory: Path) -> list[Document]:
        """Load every supported file directly inside *directory*, in name order.

        A missing directory yields an empty list. Unsupported or unreadable
        files are logged and skipped.
        """
        if not directory.is_dir():
            Log.warning(f"Directory does not exist: {directory}")
            return []

        files = sorted(path for path in directory.iterdir() if path.is_file())
        Log.info(f"Found {len(files)} files in directory: {directory}")

        documents: list[Document] = []
        for path in files:
            document = self.load_file(path)
            if document is not None:
                documents.append(document)
        return documents

    def load_file(self, path: Path) -> Document | None:
        """Load a single file, or return None if it is unsupported or unreadable."""
        try:
            text = self._find_extractor(path).extract(path)
        except UnsupportedFileTypeError as exc:
            Log.warning(str(exc))
            return None
        except ExtractionError as exc:
            Log.error(f"Failed to extract text from {path}: {exc}")
            return None

        Log.debug(f"Loaded document {path.name}: {len(text)} chars")
        return Document(name=path.name, text=text)

    def _find_extractor(self, path: Path) -> BaseTextExtractor:
        for extractor in self._extractors:
            if extractor.can_extract(path):
                return extractor
        raise UnsupportedFileTypeError(f"No extractor found for file: {path}")
