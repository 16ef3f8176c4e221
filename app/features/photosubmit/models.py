"""
Photo Submission Models Module

This module defines the data models used by the photo submission
pipeline, from the raw uploaded file through to the record sent to the
ledger and the terminal outcome shown to the user.

Features:
- File handle model
- Validated request model
- Asset descriptor model
- Ledger record model
- Outcome and response models

Data Model:
- Uploader identity
- Category and message
- Per-photo storage metadata
- Timestamps
- Outcome kinds

Dependencies:
- pydantic for data validation
- typing for type hints

Author: Photo Intake Development Team
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.shared.models import OutcomeKind
from .constants import BANNER_CLASS_ERROR, BANNER_CLASS_SUCCESS


class FileHandle(BaseModel):
    """
    Read-only reference to an uploaded file.

    Attributes:
        name (str): Declared file name
        size (int): Size in bytes
        content_type (Optional[str]): Declared MIME type
        content (bytes): Binary content
    """
    model_config = ConfigDict(frozen=True)

    name: str
    size: int
    content_type: Optional[str] = None
    content: bytes = b""

    @classmethod
    def from_bytes(cls, name: str, content: bytes, content_type: Optional[str] = None) -> "FileHandle":
        return cls(name=name, size=len(content), content_type=content_type, content=content)


class SubmissionRequest(BaseModel):
    """
    Validated submission.

    Attributes:
        name (str): Uploader full name (trimmed, non-empty)
        email (str): Uploader email (trimmed, non-empty)
        category (str): Photo category, may be empty
        message (str): Free text, may be empty
        files (List[FileHandle]): Photos in selection order
    """
    name: str
    email: str
    category: str = ""
    message: str = ""
    files: List[FileHandle]


class AssetDescriptor(BaseModel):
    """
    Metadata for one stored photo.

    Attributes:
        url (str): Secure delivery URL
        public_id (str): Unique asset identifier
        original_filename (str): Name reported by storage or the local name
        format (str): Stored format (jpg, png, ...)
        byte_size (int): Stored size, serialized as "bytes"
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    url: str
    public_id: str
    original_filename: str
    format: str = ""
    byte_size: int = Field(default=0, alias="bytes")


class SubmissionRecord(BaseModel):
    """
    Payload sent to the ledger after all uploads succeed.

    Attributes:
        name (str): Uploader full name
        email (str): Uploader email
        category (str): Photo category
        message (str): Free text
        timestamp (str): ISO-8601 creation time
        images (List[AssetDescriptor]): Stored photos in upload order
    """
    name: str
    email: str
    category: str = ""
    message: str = ""
    timestamp: str
    images: List[AssetDescriptor]

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class LedgerAck(BaseModel):
    """Success acknowledgement from the ledger."""
    success: bool = True
    message: str


class SubmissionOutcome(BaseModel):
    """
    Terminal value of one submission attempt.

    Attributes:
        kind (OutcomeKind): Which outcome was reached
        display_message (str): Text for the status banner
    """
    kind: OutcomeKind
    display_message: str

    @property
    def succeeded(self) -> bool:
        return self.kind == OutcomeKind.SUCCESS

    @property
    def css_class(self) -> str:
        return BANNER_CLASS_SUCCESS if self.succeeded else BANNER_CLASS_ERROR


class SubmitResponse(BaseModel):
    """
    Submit endpoint response model.

    Attributes:
        success (bool): Operation success status
        outcome (OutcomeKind): Terminal outcome
        message (str): Banner text
        css_class (str): Banner class
        form_cleared (bool): Whether the form fields were reset
    """
    success: bool
    outcome: OutcomeKind
    message: str
    css_class: str
    form_cleared: bool
