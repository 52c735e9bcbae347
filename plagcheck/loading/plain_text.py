from pathlib import Path

from plagcheck.loading.base import BaseTextExtractor
from plagcheck.loading.exceptions import ExtractionError


class PlainTextExtractor(BaseTextExtractor):
    """Reads UTF-8 text and Markdown files."""

    EXTENSIONS = frozenset({".txt", ".md"})

    def extract(self, path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            raise ExtractionError(f"Failed to read text file {path}: {exc}") from exc
