"""Logo upload handling for brands."""

from __future__ import annotations

import logging
import os
import time
from dataclasses import dataclass, field
from pathlib import Path

from django.conf import settings
from django.core.files.storage import FileSystemStorage

logger = logging.getLogger(__name__)

IMAGE_CONTENT_TYPES = frozenset({"image/jpeg", "image/png", "image/gif"})
IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".gif"})


class UploadError(Exception):
    """Raised when an uploaded file is rejected or cannot be written."""


@dataclass(frozen=True)
class UploadConfig:
    destination: Path
    url_prefix: str
    field_name: str = "logo"
    content_types: frozenset = field(default=IMAGE_CONTENT_TYPES)
    extensions: frozenset = field(default=IMAGE_EXTENSIONS)

    @classmethod
    def for_brand_logos(cls) -> "UploadConfig":
        return cls(
            destination=Path(settings.BRAND_LOGO_ROOT),
            url_prefix=settings.BRAND_LOGO_URL,
        )


class LogoUploadHandler:
    """Writes one uploaded image to disk and returns its stored filename."""

    def __init__(self, config: UploadConfig) -> None:
        self.config = config
        self.storage = FileSystemStorage(
            location=str(config.destination),
            base_url=config.url_prefix,
        )

    def accepts(self, uploaded_file) -> bool:
        extension = os.path.splitext(uploaded_file.name)[1].lower()
        content_type = (uploaded_file.content_type or "").lower()
        return content_type in self.config.content_types and extension in self.config.extensions

    def build_filename(self, uploaded_file) -> str:
        extension = os.path.splitext(uploaded_file.name)[1].lower()
        return f"{self.config.field_name}-{int(time.time() * 1000)}{extension}"

    def save(self, files) -> str:
        """Store the file posted under the configured field name."""
        uploaded_file = files.get(self.config.field_name)
        if uploaded_file is None:
            raise UploadError("Please choose an image file to upload.")
        if not self.accepts(uploaded_file):
            raise UploadError("Only image files are allowed!")

        try:
            stored_name = self.storage.save(self.build_filename(uploaded_file), uploaded_file)
        except OSError as exc:
            logger.error("Could not write upload to %s: %s", self.config.destination, exc)
            raise UploadError("The file could not be saved.") from exc

        logger.info("Stored upload %s in %s", stored_name, self.config.destination)
        return stored_name

    def discard(self, filename: str) -> None:
        """Remove a stored file that no document will reference."""
        self.storage.delete(filename)
        logger.info("Discarded upload %s from %s", filename, self.config.destination)
