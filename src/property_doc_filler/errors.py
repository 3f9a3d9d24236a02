"""
Error types raised by the document filler.

Every error knows the HTTP status it maps to and how to render itself
as the JSON body returned to the caller.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional


class DocumentFillerError(Exception):
    """Base exception for document generation failures."""

    status_code: int = 500

    def __init__(self, message: str, details: Optional[str] = None):
        self.message = message
        self.details = details
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to JSON-serializable dict"""
        payload: Dict[str, Any] = {"error": self.message}
        if self.details:
            payload["details"] = self.details
        return payload


class ValidationError(DocumentFillerError):
    """Caller supplied an incomplete field set."""

    status_code = 400

    def __init__(self, message: str = "All fields are required"):
        super().__init__(message)


class TemplateMissingError(DocumentFillerError):
    """Template file not found on disk."""

    def __init__(self, template_path: Path):
        self.template_path = template_path
        super().__init__("Template file not found")


class TemplateEmptyError(DocumentFillerError):
    """Template file has no pages."""

    def __init__(self, template_path: Path):
        self.template_path = template_path
        super().__init__("PDF template has no pages")


class GenerationError(DocumentFillerError):
    """Unexpected failure while loading, drawing, saving or writing the document."""

    def __init__(self, reason: Any):
        super().__init__("Failed to generate document", details=str(reason))
