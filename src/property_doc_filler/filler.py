"""
Document Filler
Responsibility: Stamp the submitted fields onto the property template
Output: A filled PDF in the generated directory and a download reference
"""

from __future__ import annotations

import logging
import threading
import time
from pathlib import Path
from typing import Any, Callable, Mapping, Optional, Sequence, Union

from PyPDF2 import PdfReader

from .config import DocumentPaths
from .errors import DocumentFillerError, GenerationError, TemplateEmptyError, TemplateMissingError
from .placements import OVERLAY_PLACEMENTS, FieldMapping
from .renderer import render_document
from .schemas import DownloadReference, FieldSet

logger = logging.getLogger(__name__)

FILENAME_PREFIX = "property_document_"
STATIC_PREFIX = "/generated"


class FilenameClock:
    """
    Millisecond timestamps that never repeat within the process.

    A request landing in the same millisecond as the previous one is moved
    to the next millisecond.
    """

    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock
        self._last = 0
        self._lock = threading.Lock()

    def next_timestamp(self) -> int:
        with self._lock:
            now = int(self._clock() * 1000)
            if now <= self._last:
                now = self._last + 1
            self._last = now
            return now


default_clock = FilenameClock()


def build_filename(timestamp: int) -> str:
    return f"{FILENAME_PREFIX}{timestamp}.pdf"


def write_artifact(output_dir: Path, pdf_bytes: bytes, clock: FilenameClock) -> str:
    """
    Write ``pdf_bytes`` under a fresh filename and return that name.

    Files are created exclusively, so an existing artifact is never
    overwritten; a taken name just moves on to the next timestamp.
    """
    while True:
        filename = build_filename(clock.next_timestamp())
        output_path = output_dir / filename
        try:
            handle = output_path.open("xb")
        except FileExistsError:
            logger.warning("Filename %s already taken, retrying", filename)
            continue
        try:
            with handle:
                handle.write(pdf_bytes)
        except OSError:
            output_path.unlink(missing_ok=True)
            raise
        return filename


def load_template(template_path: Path) -> PdfReader:
    """
    Load the template and make sure it has pages.

    Raises:
        TemplateMissingError: If the template file does not exist
        TemplateEmptyError: If the template has no pages
    """
    if not template_path.is_file():
        logger.error("Template not found: %s", template_path)
        raise TemplateMissingError(template_path)

    reader = PdfReader(template_path)
    if len(reader.pages) == 0:
        logger.error("Template has no pages: %s", template_path)
        raise TemplateEmptyError(template_path)
    return reader


def generate(
    fields: Union[Mapping[str, Any], FieldSet, None],
    paths: DocumentPaths,
    base_url: str,
    placements: Sequence[FieldMapping] = OVERLAY_PLACEMENTS,
    clock: Optional[FilenameClock] = None,
) -> DownloadReference:
    """
    Fill the property template with ``fields`` and persist the result.

    Args:
        fields: Raw field data keyed by wire name, or an already validated FieldSet
        paths: Resolved template and output locations
        base_url: Public URL prefix of this service (e.g. http://localhost:5000)
        placements: Overlay table to apply
        clock: Filename clock (the process-wide one if None)

    Returns:
        DownloadReference with the absolute download URL and the filename

    Raises:
        ValidationError: If any field is missing or empty (before any file I/O)
        TemplateMissingError: If the template file does not exist
        TemplateEmptyError: If the template has no pages
        GenerationError: For any other failure while building or writing the PDF
    """
    field_set = fields if isinstance(fields, FieldSet) else FieldSet.from_mapping(fields)
    clock = clock or default_clock

    logger.info("Starting document generation")
    try:
        template_reader = load_template(paths.template)
        pdf_bytes, drawn = render_document(template_reader, field_set, placements)
        logger.debug(
            "Template has %d page(s), drew %d overlay(s)", len(template_reader.pages), drawn
        )
        filename = write_artifact(paths.generated_dir, pdf_bytes, clock)
    except DocumentFillerError:
        raise
    except Exception as e:
        logger.exception("Error generating document: %s", e)
        raise GenerationError(e) from e

    logger.info("Document generated: %s", filename)
    return DownloadReference(
        download_url=f"{base_url.rstrip('/')}{STATIC_PREFIX}/{filename}",
        filename=filename,
    )
