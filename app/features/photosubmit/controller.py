"""
Submission Controller Module

This module orchestrates one submission attempt: validation, sequential
photo upload, ledger submission, and the status shown to the user.

Features:
- Phase state machine
- Submit control busy/disabled handling
- Status banner updates
- Form reset on success
- Error to message mapping

System Architecture:
    Idle -> Validating -> Uploading -> Submitting -> Terminal -> Idle

    Validation failures go straight to Terminal without touching the
    submit control. The control is re-enabled and its label restored on
    every exit path, including unexpected faults.

Dependencies:
- Validator, AssetUploader, RecordSubmitter
- PhotoForm elements
- logging for tracking

Author: Photo Intake Development Team
"""

import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional

from app.shared.errors import (
    RecordRejected,
    ResponseUnparseable,
    SubmissionError,
    TransportError,
    UploadFailed,
    ValidationRejected,
)
from app.shared.models import ControllerPhase, OutcomeKind, UiState
from .asset_uploader import AssetUploader
from .constants import (
    BUSY_LABEL_SAVING,
    BUSY_LABEL_UPLOADING,
    MSG_RECORD_REJECTED,
    MSG_RESPONSE_UNPARSEABLE,
    MSG_SUCCESS,
    MSG_TRANSPORT_ERROR,
    MSG_UNEXPECTED_ERROR,
    MSG_UPLOAD_FAILED,
)
from .form import PhotoForm, SubmitEvent
from .models import SubmissionOutcome, SubmissionRecord
from .record_submitter import RecordSubmitter
from .validator import validate

logger = logging.getLogger(__name__)


def iso_timestamp(moment: datetime) -> str:
    """UTC ISO-8601 with millisecond precision and a Z suffix."""
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def outcome_for_error(error: Exception) -> SubmissionOutcome:
    """
    Map any pipeline error to exactly one outcome.

    Notes:
        - Validation keeps its own message
        - Ledger rejections carry the server reason
        - Anything unknown is reported with its text
    """
    if isinstance(error, ValidationRejected):
        return SubmissionOutcome(kind=error.kind, display_message=error.message)
    if isinstance(error, UploadFailed):
        return SubmissionOutcome(kind=error.kind, display_message=MSG_UPLOAD_FAILED)
    if isinstance(error, TransportError):
        return SubmissionOutcome(kind=error.kind, display_message=MSG_TRANSPORT_ERROR)
    if isinstance(error, RecordRejected):
        return SubmissionOutcome(
            kind=error.kind,
            display_message=MSG_RECORD_REJECTED.format(reason=error.reason),
        )
    if isinstance(error, ResponseUnparseable):
        return SubmissionOutcome(kind=error.kind, display_message=MSG_RESPONSE_UNPARSEABLE)
    return SubmissionOutcome(
        kind=OutcomeKind.UNEXPECTED_ERROR,
        display_message=MSG_UNEXPECTED_ERROR.format(error=error),
    )


class SubmissionController:
    """
    Submission orchestrator.

    Attributes:
        uploader (AssetUploader): Photo uploader
        submitter (RecordSubmitter): Ledger client
        phase (ControllerPhase): Current phase
        transitions (List[ControllerPhase]): Phases entered during the last run
        last_outcome (Optional[SubmissionOutcome]): Result of the last run
    """

    def __init__(
        self,
        uploader: Optional[AssetUploader] = None,
        submitter: Optional[RecordSubmitter] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.uploader = uploader or AssetUploader()
        self.submitter = submitter or RecordSubmitter()
        self.clock = clock or (lambda: datetime.now(timezone.utc))
        self.phase = ControllerPhase.IDLE
        self.transitions: List[ControllerPhase] = []
        self.last_outcome: Optional[SubmissionOutcome] = None

    @property
    def ui_state(self) -> UiState:
        if self.phase in (ControllerPhase.UPLOADING, ControllerPhase.SUBMITTING):
            return UiState.SUBMITTING
        if self.phase == ControllerPhase.TERMINAL:
            return UiState.DONE
        return UiState.IDLE

    def _enter(self, phase: ControllerPhase):
        self.phase = phase
        self.transitions.append(phase)

    async def handle_submit(self, event: SubmitEvent) -> SubmissionOutcome:
        """
        Run one submission for the form that raised the event.

        Args:
            event: Submit event

        Returns:
            SubmissionOutcome: Terminal outcome, also shown on the banner
        """
        event.prevent_default()
        form = event.form
        control = form.submit_control
        original_label = control.label
        self.transitions = []
        logger.info(f"Form submitted: {form.form_id}")

        try:
            outcome = await self._run(form)
        except SubmissionError as e:
            outcome = outcome_for_error(e)
        except Exception as e:
            logger.exception(f"Unexpected error during submission: {str(e)}")
            outcome = outcome_for_error(e)
        finally:
            control.label = original_label
            control.disabled = False

        self._finish(form, outcome)
        return outcome

    async def _run(self, form: PhotoForm) -> SubmissionOutcome:
        self._enter(ControllerPhase.VALIDATING)
        request = validate(form.fields, form.photos)

        self._enter(ControllerPhase.UPLOADING)
        form.submit_control.label = BUSY_LABEL_UPLOADING
        form.submit_control.disabled = True
        form.status_banner.hide()
        assets = await self.uploader.upload(request.files)

        self._enter(ControllerPhase.SUBMITTING)
        form.submit_control.label = BUSY_LABEL_SAVING
        record = SubmissionRecord(
            name=request.name,
            email=request.email,
            category=request.category,
            message=request.message,
            timestamp=iso_timestamp(self.clock()),
            images=assets,
        )
        ack = await self.submitter.submit(record)
        logger.info(f"Ledger acknowledged: {ack.message}")
        return SubmissionOutcome(kind=OutcomeKind.SUCCESS, display_message=MSG_SUCCESS)

    def _finish(self, form: PhotoForm, outcome: SubmissionOutcome):
        self._enter(ControllerPhase.TERMINAL)
        if outcome.succeeded:
            form.reset()
            logger.info("Submission completed")
        else:
            logger.warning(f"Submission ended with {outcome.kind.value}: {outcome.display_message}")

        form.status_banner.show(outcome.display_message, outcome.css_class)
        self.last_outcome = outcome
        self.phase = ControllerPhase.IDLE
