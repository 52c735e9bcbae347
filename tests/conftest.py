from pathlib import Path

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas


def _write_pdf(path: Path, pages: list[str]) -> Path:
    c = canvas.Canvas(str(path), pagesize=letter)
    for text in pages:
        if text:
            c.drawString(72, 720, text)
        c.showPage()
    c.save()
    return path


@pytest.fixture()
def sample_pdf_path(tmp_path: Path) -> Path:
    """A single-page PDF with known text content."""
    return _write_pdf(tmp_path / "sample.pdf", ["Hello PDF World"])


@pytest.fixture()
def multi_page_pdf_path(tmp_path: Path) -> Path:
    """A two-page PDF with known text on each page."""
    return _write_pdf(tmp_path / "multi.pdf", ["Page one content", "Page two content"])


@pytest.fixture()
def empty_pdf_path(tmp_path: Path) -> Path:
    """A valid PDF with a single blank page."""
    return _write_pdf(tmp_path / "empty.pdf", [""])
