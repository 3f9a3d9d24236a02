"""
Overlay rendering.

Field values are drawn with reportlab on blank pages sized like the template
pages, then merged onto the template with PyPDF2. Text uses the standard
Helvetica font, which is not embedded and only covers the WinAnsi (cp1252)
character set, so values outside it are rejected.
"""

from __future__ import annotations

from io import BytesIO
from typing import Dict, List, Sequence, Tuple

from PyPDF2 import PdfReader, PdfWriter
from reportlab.pdfgen import canvas

from .placements import DEFAULT_FONT, FieldMapping, applicable_placements
from .schemas import FieldSet

PageSize = Tuple[float, float]
OverlayPlan = List[Tuple[FieldMapping, str]]

FONT_ENCODING = "cp1252"
LINE_HEIGHT_FACTOR = 1.2


def collect_page_sizes(reader: PdfReader) -> List[PageSize]:
    return [
        (
            float(page.mediabox.right) - float(page.mediabox.left),
            float(page.mediabox.top) - float(page.mediabox.bottom),
        )
        for page in reader.pages
    ]


def plan_overlays(
    fields: FieldSet,
    page_count: int,
    placements: Sequence[FieldMapping],
) -> OverlayPlan:
    """Pair every placement that fits the template with the text it draws."""
    return [
        (mapping, fields.value(mapping.key))
        for mapping in applicable_placements(placements, page_count)
    ]


def text_lines(text: str) -> List[str]:
    """
    Split a field value into the lines drawn for it.

    Raises:
        ValueError: If a line has characters the standard font can't encode
    """
    lines = text.splitlines() or [text]
    for line in lines:
        try:
            line.encode(FONT_ENCODING)
        except UnicodeEncodeError as e:
            raise ValueError(
                f"{DEFAULT_FONT} ({FONT_ENCODING}) cannot encode {line[e.start:e.end]!r}"
            ) from e
    return lines


def draw_text(canv: canvas.Canvas, mapping: FieldMapping, page_height: float, text: str) -> None:
    """Draw ``text`` at ``mapping``, one baseline per line going down the page."""
    canv.setFont(DEFAULT_FONT, mapping.font_size)
    canv.setFillColorRGB(*mapping.color)
    line_height = mapping.font_size * LINE_HEIGHT_FACTOR
    for index, line in enumerate(text_lines(text)):
        canv.drawString(mapping.x, page_height - mapping.y_from_top - index * line_height, line)


def build_overlay(plan: OverlayPlan, page_sizes: Sequence[PageSize]) -> PdfReader:
    buffer = BytesIO()
    canv = canvas.Canvas(buffer)

    pages_by_index: Dict[int, OverlayPlan] = {i: [] for i in range(len(page_sizes))}
    for mapping, text in plan:
        pages_by_index[mapping.page].append((mapping, text))

    for page_index, (width, height) in enumerate(page_sizes):
        canv.setPageSize((width, height))
        for mapping, text in pages_by_index[page_index]:
            draw_text(canv, mapping, height, text)
        canv.showPage()

    canv.save()
    buffer.seek(0)
    return PdfReader(buffer)


def merge_overlay(template_reader: PdfReader, overlay_reader: PdfReader, plan: OverlayPlan) -> bytes:
    """Stamp the overlay onto the template pages and serialize the result."""
    drawn_pages = {mapping.page for mapping, _ in plan}
    writer = PdfWriter()

    for index, template_page in enumerate(template_reader.pages):
        if index in drawn_pages:
            template_page.merge_page(overlay_reader.pages[index])
        writer.add_page(template_page)

    output = BytesIO()
    writer.write(output)
    return output.getvalue()


def render_document(template_reader: PdfReader, fields: FieldSet, placements: Sequence[FieldMapping]) -> Tuple[bytes, int]:
    """
    Draw ``fields`` onto a loaded template.

    Returns:
        The serialized PDF and the number of overlays drawn
    """
    page_sizes = collect_page_sizes(template_reader)
    plan = plan_overlays(fields, len(page_sizes), placements)
    overlay_reader = build_overlay(plan, page_sizes)
    return merge_overlay(template_reader, overlay_reader, plan), len(plan)
