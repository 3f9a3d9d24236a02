"""
Pytest configuration and fixtures for the document filler tests.
"""
from pathlib import Path

import pytest
from PyPDF2 import PdfWriter
from reportlab.lib.pagesizes import A4, LETTER
from reportlab.pdfgen import canvas

from property_doc_filler.config import Config


def write_template(path: Path, page_sizes) -> Path:
    """Write a template with one page per entry of ``page_sizes``."""
    if not page_sizes:
        writer = PdfWriter()
        with path.open("wb") as handle:
            writer.write(handle)
        return path

    canv = canvas.Canvas(str(path))
    for index, size in enumerate(page_sizes):
        canv.setPageSize(size)
        canv.setFont("Helvetica", 8)
        canv.drawString(20, 20, f"template page {index + 1}")
        canv.showPage()
    canv.save()
    return path


@pytest.fixture
def make_template(tmp_path):
    """Factory: ``make_template(5)`` or ``make_template(sizes=[...])``."""
    def _make(pages=5, sizes=None, name="document_template.pdf"):
        sizes = sizes if sizes is not None else [LETTER] * pages
        return write_template(tmp_path / name, sizes)
    return _make


@pytest.fixture
def mixed_sizes():
    """Five pages where the middle ones are A4 and the rest Letter."""
    return [LETTER, LETTER, A4, A4, LETTER]


@pytest.fixture
def config(tmp_path, monkeypatch):
    """Config rooted in a temporary service directory."""
    monkeypatch.setenv("SERVICE_ROOT", str(tmp_path))
    monkeypatch.setenv("PORT", "5000")
    monkeypatch.setenv("TEMPLATE_PATH", "document_template.pdf")
    monkeypatch.setenv("UPLOADS_DIR", "uploads")
    monkeypatch.setenv("GENERATED_DIR", "generated")
    monkeypatch.delenv("PUBLIC_BASE_URL", raising=False)
    monkeypatch.delenv("OVERLAY_MAPPING_PATH", raising=False)
    monkeypatch.delenv("ALLOWED_ORIGINS", raising=False)
    return Config()


@pytest.fixture
def paths(config):
    resolved = config.paths()
    resolved.generated_dir.mkdir(parents=True, exist_ok=True)
    resolved.uploads_dir.mkdir(parents=True, exist_ok=True)
    return resolved


@pytest.fixture
def sample_fields():
    return {
        "fullName": "Jane Doe",
        "address": "12 Harbor Lane",
        "date": "2024-05-01",
        "price": "$350,000",
    }
