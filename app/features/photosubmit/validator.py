"""
Submission Validator Module

Turns raw form fields into a validated SubmissionRequest or raises
ValidationRejected. Rules run in a fixed order and the first failure
stops evaluation. No file type or content checks are made.

Author: Photo Intake Development Team
"""

import logging
from typing import Mapping, Optional, Sequence

from app.shared.errors import ValidationRejected
from .constants import (
    MAX_PHOTO_BYTES,
    MAX_PHOTOS,
    MSG_MISSING_FIELDS,
    MSG_NO_PHOTOS,
    MSG_PHOTO_TOO_LARGE,
    MSG_TOO_MANY_PHOTOS,
)
from .models import FileHandle, SubmissionRequest

logger = logging.getLogger(__name__)


def validate(
    fields: Mapping[str, Optional[str]],
    files: Optional[Sequence[FileHandle]],
    max_photos: int = MAX_PHOTOS,
    max_photo_bytes: int = MAX_PHOTO_BYTES,
) -> SubmissionRequest:
    """
    Validate raw form input.

    Args:
        fields: Raw text fields (name, email, category, message)
        files: Selected files in order
        max_photos: Count limit
        max_photo_bytes: Per-file size limit

    Returns:
        SubmissionRequest: Trimmed, validated request

    Raises:
        ValidationRejected: On the first failing rule
    """
    name = (fields.get("name") or "").strip()
    email = (fields.get("email") or "").strip()
    category = fields.get("category") or ""
    message = (fields.get("message") or "").strip()

    if not name or not email:
        raise ValidationRejected(MSG_MISSING_FIELDS)
    if not files:
        raise ValidationRejected(MSG_NO_PHOTOS)
    if len(files) > max_photos:
        raise ValidationRejected(MSG_TOO_MANY_PHOTOS.format(max_photos=max_photos))

    for file in files:
        if file.size > max_photo_bytes:
            logger.info(f"Rejected oversized photo {file.name} ({file.size} bytes)")
            raise ValidationRejected(
                MSG_PHOTO_TOO_LARGE.format(filename=file.name, max_size=size_label(max_photo_bytes))
            )

    return SubmissionRequest(
        name=name,
        email=email,
        category=category,
        message=message,
        files=list(files),
    )


def size_label(num_bytes: int) -> str:
    """Whole megabytes when exact, otherwise bytes."""
    mb = 1024 * 1024
    if num_bytes >= mb and num_bytes % mb == 0:
        return f"{num_bytes // mb}MB"
    return f"{num_bytes} bytes"
