"""
Property Document Filler

Stamps a buyer's name, the property address, a date and a price onto a
fixed multi-page PDF template and serves the result over HTTP.

Usage:
    from property_doc_filler import Config, generate

    config = Config()
    reference = generate(
        {"fullName": "Jane Doe", "address": "1 Main St", "date": "2024-05-01", "price": "$350,000"},
        paths=config.paths(),
        base_url=config.PUBLIC_BASE_URL,
    )
    print(reference.download_url)
"""

from .config import Config, DocumentPaths, ensure_directories
from .errors import (
    DocumentFillerError,
    GenerationError,
    TemplateEmptyError,
    TemplateMissingError,
    ValidationError,
)
from .filler import FilenameClock, generate
from .placements import OVERLAY_PLACEMENTS, FieldMapping, load_field_mappings
from .schemas import DownloadReference, FieldSet

__all__ = [
    # Configuration
    "Config",
    "DocumentPaths",
    "ensure_directories",
    # Generation
    "generate",
    "FilenameClock",
    "FieldSet",
    "DownloadReference",
    "FieldMapping",
    "OVERLAY_PLACEMENTS",
    "load_field_mappings",
    # Errors
    "DocumentFillerError",
    "ValidationError",
    "TemplateMissingError",
    "TemplateEmptyError",
    "GenerationError",
]
