"""
Configuration module for the Property Document Filler.
Loads environment variables and provides configuration settings.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

# Load .env file from the working directory the service is started in
load_dotenv(Path.cwd() / ".env")

logger = logging.getLogger(__name__)

DEFAULT_PORT = 5000
DEFAULT_ALLOWED_ORIGINS = "https://property-doc-frontend.vercel.app"
TEMPLATE_FILENAME = "document_template.pdf"


@dataclass(frozen=True)
class DocumentPaths:
    """
    Resolved filesystem locations used by the document filler.

    Attributes:
        template: The template PDF (read-only input)
        uploads_dir: Directory for uploaded files (created, not used by generation)
        generated_dir: Directory generated artifacts are written to and served from
    """
    template: Path
    uploads_dir: Path
    generated_dir: Path


def _resolve(root: Path, value: str) -> Path:
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = root / path
    return path.resolve()


class Config:
    """Configuration settings for the document filler service."""

    def __init__(self) -> None:
        self.PORT: int = int(os.getenv("PORT", str(DEFAULT_PORT)))
        self.HOST: str = os.getenv("HOST", "0.0.0.0")
        self.PUBLIC_BASE_URL: str = os.getenv(
            "PUBLIC_BASE_URL", f"http://localhost:{self.PORT}"
        ).rstrip("/")
        self.ALLOWED_ORIGINS: List[str] = [
            origin.strip()
            for origin in os.getenv("ALLOWED_ORIGINS", DEFAULT_ALLOWED_ORIGINS).split(",")
            if origin.strip()
        ]
        self.SERVICE_ROOT: Path = Path(os.getenv("SERVICE_ROOT", str(Path.cwd()))).resolve()
        self.TEMPLATE_PATH: str = os.getenv("TEMPLATE_PATH", TEMPLATE_FILENAME)
        self.UPLOADS_DIR: str = os.getenv("UPLOADS_DIR", "uploads")
        self.GENERATED_DIR: str = os.getenv("GENERATED_DIR", "generated")
        mapping = os.getenv("OVERLAY_MAPPING_PATH", "")
        self.OVERLAY_MAPPING_PATH: Optional[Path] = (
            _resolve(self.SERVICE_ROOT, mapping) if mapping else None
        )
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    def paths(self) -> DocumentPaths:
        """Resolve the configured paths against the service root."""
        return DocumentPaths(
            template=_resolve(self.SERVICE_ROOT, self.TEMPLATE_PATH),
            uploads_dir=_resolve(self.SERVICE_ROOT, self.UPLOADS_DIR),
            generated_dir=_resolve(self.SERVICE_ROOT, self.GENERATED_DIR),
        )

    def validate(self) -> None:
        """Validate that the configuration values are usable."""
        if not 0 < self.PORT < 65536:
            raise ValueError(f"PORT must be between 1 and 65535, got {self.PORT}")
        if not self.PUBLIC_BASE_URL.startswith(("http://", "https://")):
            raise ValueError(f"PUBLIC_BASE_URL must be an http(s) URL: {self.PUBLIC_BASE_URL}")


def ensure_directories(paths: DocumentPaths) -> None:
    """Create the uploads and generated directories if they don't exist."""
    for directory in (paths.uploads_dir, paths.generated_dir):
        directory.mkdir(parents=True, exist_ok=True)
        logger.debug("Ensured directory %s", directory)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
