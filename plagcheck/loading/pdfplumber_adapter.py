from pathlib import Path

import pdfplumber

from plagcheck.loading.base import BaseTextExtractor
from plagcheck.loading.exceptions import PdfExtractionError


class PdfPlumberExtractor(BaseTextExtractor):
    """Extracts PDF text page by page using pdfplumber."""

    EXTENSIONS = frozenset({".pdf"})

    def extract(self, path: Path) -> str:
        try:
            with pdfplumber.open(path) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
            return "\n".join(pages).strip()
        except PdfExtractionError:
            raise
        except Exception as exc:
            raise PdfExtractionError(f"pdfplumber could not read {path.name}: {exc}") from exc
