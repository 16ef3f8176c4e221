"""
Photo Submission Constants Module

This module defines constants used throughout the photo submission
feature for limits, button labels, banner classes and user-facing
messages.

Features:
- Size and count limits
- Busy labels
- Banner classes
- Display messages
- HTTP status mapping

Dependencies:
- config for limits
- OutcomeKind from shared models

Author: Photo Intake Development Team
"""

from app.shared import config
from app.shared.models import OutcomeKind

# Limits
MAX_PHOTOS = config.MAX_PHOTOS  # Maximum photos per submission
MAX_PHOTO_BYTES = config.MAX_PHOTO_BYTES  # Maximum size per photo in bytes

# Submit control labels
BUSY_LABEL_UPLOADING = "Uploading photos..."
BUSY_LABEL_SAVING = "Saving information..."
DEFAULT_SUBMIT_LABEL = "Send photos"

# Banner classes
BANNER_CLASS_SUCCESS = "success"
BANNER_CLASS_ERROR = "error"

# Display messages
MSG_SUCCESS = "Success! Your photos were uploaded. Thank you for sharing your memories."
MSG_MISSING_FIELDS = "Missing required fields: please enter your name and email."
MSG_NO_PHOTOS = "Please select at least one photo."
MSG_TOO_MANY_PHOTOS = "Maximum {max_photos} photos allowed."
MSG_PHOTO_TOO_LARGE = '"{filename}" is too large. Maximum {max_size}.'
MSG_UPLOAD_FAILED = "Error uploading the photos. Please check that they are valid image files."
MSG_TRANSPORT_ERROR = "Connection error. Please check your internet connection and try again."
MSG_RECORD_REJECTED = "Your submission could not be saved: {reason}"
MSG_RESPONSE_UNPARSEABLE = (
    "Your photos were uploaded but we could not confirm your submission. "
    "Please contact the organizer."
)
MSG_UNEXPECTED_ERROR = "Error: {error}"

# Ledger acknowledgement texts
LEDGER_GENERIC_SUCCESS = "Submission recorded"
LEDGER_GENERIC_REJECTION = "The server did not accept the submission"
LEDGER_SENT_BLIND = "Submission sent"

# HTTP status returned by the submit endpoint for each outcome
OUTCOME_HTTP_STATUS = {
    OutcomeKind.SUCCESS: 200,
    OutcomeKind.VALIDATION_REJECTED: 400,
    OutcomeKind.UPLOAD_FAILED: 502,
    OutcomeKind.TRANSPORT_ERROR: 503,
    OutcomeKind.RECORD_REJECTED: 502,
    OutcomeKind.RESPONSE_UNPARSEABLE: 202,
    OutcomeKind.UNEXPECTED_ERROR: 500,
}
