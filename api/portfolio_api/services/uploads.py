"""Validation and storage of uploaded images and the resume PDF."""

import asyncio
import logging
import uuid
from pathlib import Path

from fastapi import UploadFile, status

from portfolio_api.config import Settings
from portfolio_api.errors import api_error

logger = logging.getLogger(__name__)

IMAGE_TYPES = {
    "image/jpeg": {".jpg", ".jpeg"},
    "image/jpg": {".jpg", ".jpeg"},
    "image/png": {".png"},
    "image/gif": {".gif"},
}
PDF_TYPE = "application/pdf"


async def _read_limited(file: UploadFile, limit: int) -> bytes:
    content = await file.read(limit + 1)
    if len(content) > limit:
        raise api_error(
            status.HTTP_413_CONTENT_TOO_LARGE,
            "FILE_TOO_LARGE",
            f"File exceeds the {limit // (1024 * 1024)} MB limit",
        )
    return content


def _write_file(path: Path, content: bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)


async def save_image(file: UploadFile, config: Settings) -> str:
    """
    Store an uploaded image under the upload directory.

    Returns the public URL path. Raises 400 for non-image files and 413 for
    files over the size limit.
    """
    suffix = Path(file.filename or "").suffix.lower()
    allowed_suffixes = IMAGE_TYPES.get(file.content_type or "")
    if not allowed_suffixes or suffix not in allowed_suffixes:
        raise api_error(
            status.HTTP_400_BAD_REQUEST, "INVALID_FILE", "Only image files are allowed"
        )

    content = await _read_limited(file, config.max_upload_bytes)

    filename = f"{uuid.uuid4().hex}{suffix}"
    await asyncio.to_thread(_write_file, Path(config.upload_dir) / filename, content)

    logger.info("Uploaded image %s (%d bytes)", filename, len(content))
    return f"/uploads/{filename}"


async def save_resume(file: UploadFile, config: Settings) -> str:
    """Replace the published resume. Only PDFs are accepted."""
    if file.content_type != PDF_TYPE:
        raise api_error(
            status.HTTP_400_BAD_REQUEST, "INVALID_FILE", "Only PDF files are allowed"
        )

    content = await _read_limited(file, config.max_upload_bytes)

    destination = Path(config.resume_path)
    await asyncio.to_thread(_write_file, destination, content)

    logger.info("Uploaded resume to %s (%d bytes)", destination, len(content))
    return f"/{destination.name}"
