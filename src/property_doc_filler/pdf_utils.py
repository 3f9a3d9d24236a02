"""
PDF inspection helpers used to check and calibrate overlay coordinates.

Coordinates returned here use a top-left origin, the same convention as
``FieldMapping.y_from_top``.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple, Union

import fitz  # pymupdf

PdfInput = Union[bytes, str, Path]


@dataclass(frozen=True)
class PositionedText:
    page_index: int
    text: str
    x0: float
    y0: float
    x1: float
    y1: float


def _open(pdf_input: PdfInput) -> fitz.Document:
    if isinstance(pdf_input, bytes):
        return fitz.open(stream=pdf_input, filetype="pdf")
    return fitz.open(str(pdf_input))


def pdf_page_count(pdf_input: PdfInput) -> int:
    """
    Get the number of pages in a PDF.

    Args:
        pdf_input: PDF as bytes, file path string, or Path object

    Returns:
        Number of pages in the PDF
    """
    doc = _open(pdf_input)
    count = len(doc)
    doc.close()
    return count


def pdf_page_sizes(pdf_input: PdfInput) -> List[Tuple[float, float]]:
    doc = _open(pdf_input)
    sizes = [(page.rect.width, page.rect.height) for page in doc]
    doc.close()
    return sizes


def extract_text_lines(pdf_input: PdfInput) -> List[PositionedText]:
    """
    Extract every text line with its bounding box, page by page.

    Args:
        pdf_input: PDF as bytes, file path string, or Path object

    Returns:
        Lines in reading order, with coordinates measured from the top-left
    """
    doc = _open(pdf_input)
    lines: List[PositionedText] = []

    for page_index, page in enumerate(doc):
        for block in page.get_text("dict")["blocks"]:
            for line in block.get("lines", []):
                text = "".join(span["text"] for span in line["spans"]).strip()
                if not text:
                    continue
                x0, y0, x1, y1 = line["bbox"]
                lines.append(PositionedText(page_index, text, x0, y0, x1, y1))

    doc.close()
    return lines


def find_text(pdf_input: PdfInput, page_index: int, needle: str) -> List[PositionedText]:
    """Bounding boxes of every occurrence of ``needle`` on one page."""
    doc = _open(pdf_input)
    page = doc[page_index]
    hits = [
        PositionedText(page_index, needle, rect.x0, rect.y0, rect.x1, rect.y1)
        for rect in page.search_for(needle)
    ]
    doc.close()
    return hits
