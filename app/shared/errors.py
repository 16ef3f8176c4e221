"""
Submission Errors Module

This module defines the exception taxonomy raised by the submission
pipeline. Leaf components raise these; the submission controller is the
only place they are caught and turned into a user-facing message.

Features:
- One exception per error category
- Outcome kind carried on every error
- Context fields for logging

Dependencies:
- OutcomeKind from shared models

Author: Photo Intake Development Team
"""

from typing import Optional

from app.shared.models import OutcomeKind


class SubmissionError(Exception):
    """
    Base class for pipeline failures.

    Attributes:
        kind (OutcomeKind): Outcome the error maps to
        message (str): Human-readable description
    """

    kind = OutcomeKind.UNEXPECTED_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationRejected(SubmissionError):
    """User input problem. No network call was made."""

    kind = OutcomeKind.VALIDATION_REJECTED


class UploadFailed(SubmissionError):
    """
    Object storage refused or errored on a specific file.

    Attributes:
        status (int): HTTP status returned by storage
        filename (str): Local name of the file being uploaded
        body (str): Error body returned by storage
    """

    kind = OutcomeKind.UPLOAD_FAILED

    def __init__(self, status: int, filename: str, body: str = ""):
        super().__init__(f"Error uploading image {filename}: {status}")
        self.status = status
        self.filename = filename
        self.body = body


class TransportError(SubmissionError):
    """
    Network unreachable during upload or ledger submission.

    Attributes:
        phase (str): "upload" or "ledger"
    """

    kind = OutcomeKind.TRANSPORT_ERROR

    def __init__(self, phase: str, cause: Optional[BaseException] = None):
        super().__init__(f"Network error during {phase}: {cause}")
        self.phase = phase
        self.cause = cause


class RecordRejected(SubmissionError):
    """
    Ledger explicitly reported failure.

    Attributes:
        reason (str): Server-supplied or generic reason
    """

    kind = OutcomeKind.RECORD_REJECTED

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class ResponseUnparseable(SubmissionError):
    """
    Ledger answer was neither JSON nor matched the success heuristic.

    Attributes:
        raw_text (str): Body exactly as received
    """

    kind = OutcomeKind.RESPONSE_UNPARSEABLE

    def __init__(self, raw_text: str):
        super().__init__("Ledger response could not be interpreted")
        self.raw_text = raw_text
