from plagcheck.config.settings import Settings
from plagcheck.loading.base import BaseTextExtractor
from plagcheck.loading.pdfplumber_adapter import PdfPlumberExtractor
from plagcheck.loading.plain_text import PlainTextExtractor
from plagcheck.loading.pymupdf_adapter import PyMuPdfExtractor


class ExtractorFactory:
    """Creates the extractor chain: plain text first, then the configured PDF engine."""

    PDF_ADAPTERS: dict[str, type[BaseTextExtractor]] = {
        "pdfplumber": PdfPlumberExtractor,
        "pymupdf": PyMuPdfExtractor,
    }

    @classmethod
    def create(cls, settings: Settings) -> list[BaseTextExtractor]:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.PDF_ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.PDF_ADAPTERS)}"
            )
        return [PlainTextExtractor(), adapter_cls()]
