"""
Shared Models Module

This module contains shared enums used across the photo submission
pipeline.

Features:
- Outcome kinds
- Controller phases
- UI states
- Ledger transport modes

Author: Photo Intake Development Team
"""

from enum import Enum


class OutcomeKind(str, Enum):
    """
    Terminal outcome of one submission attempt.

    Attributes:
        SUCCESS: Photos uploaded and record stored
        VALIDATION_REJECTED: Input problem, nothing sent
        UPLOAD_FAILED: Storage rejected a photo
        TRANSPORT_ERROR: Network unreachable
        RECORD_REJECTED: Ledger reported failure
        RESPONSE_UNPARSEABLE: Ledger answer could not be interpreted
        UNEXPECTED_ERROR: Any other fault
    """
    SUCCESS = "success"
    VALIDATION_REJECTED = "validation_rejected"
    UPLOAD_FAILED = "upload_failed"
    TRANSPORT_ERROR = "transport_error"
    RECORD_REJECTED = "record_rejected"
    RESPONSE_UNPARSEABLE = "response_unparseable"
    UNEXPECTED_ERROR = "unexpected_error"


class ControllerPhase(str, Enum):
    """Phases a submission moves through."""
    IDLE = "idle"
    VALIDATING = "validating"
    UPLOADING = "uploading"
    SUBMITTING = "submitting"
    TERMINAL = "terminal"


class UiState(str, Enum):
    """Coarse UI state derived from the controller phase."""
    IDLE = "idle"
    SUBMITTING = "submitting"
    DONE = "done"


class LedgerMode(str, Enum):
    """
    Ledger transport policy.

    Attributes:
        VERIFIED: JSON POST, response read and interpreted
        FIRE_AND_FORGET: text/plain POST, response never read
    """
    VERIFIED = "verified"
    FIRE_AND_FORGET = "fire_and_forget"
