from pathlib import Path

import pymupdf

from plagcheck.loading.base import BaseTextExtractor
from plagcheck.loading.exceptions import PdfExtractionError


class PyMuPdfExtractor(BaseTextExtractor):
    """Extracts PDF text page by page using PyMuPDF."""

    EXTENSIONS = frozenset({".pdf"})

    def extract(self, path: Path) -> str:
        try:
            with pymupdf.open(str(path)) as doc:  # type: ignore[no-untyped-call]
                pages = [page.get_text() for page in doc]
            return "\n".join(pages).strip()
        except PdfExtractionError:
            raise
        except Exception as exc:
            raise PdfExtractionError(f"pymupdf could not read {path.name}: {exc}") from exc
