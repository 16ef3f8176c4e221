"""
Photo Form Module

In-process stand-ins for the page elements the submission controller
drives: the form with its fields, the submit control, the status banner,
and the hosting document that owns the form.

Features:
- Form field storage and reset
- Submit listeners and dispatch
- Submit control label/disabled state
- Status banner text/class/visibility
- Document readiness callbacks

Dependencies:
- dataclasses for element state
- logging for tracking

Author: Photo Intake Development Team
"""

import logging
import uuid
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Dict, List, Optional

from .constants import DEFAULT_SUBMIT_LABEL
from .models import FileHandle

logger = logging.getLogger(__name__)

FIELD_NAMES = ("name", "email", "category", "message")


@dataclass
class SubmitControl:
    """Submit button state."""
    label: str = DEFAULT_SUBMIT_LABEL
    disabled: bool = False


@dataclass
class StatusBanner:
    """Status message element."""
    text: str = ""
    css_class: str = ""
    visible: bool = False

    def show(self, text: str, css_class: str):
        self.text = text
        self.css_class = css_class
        self.visible = True

    def hide(self):
        self.visible = False


@dataclass
class SubmitEvent:
    """
    A single submit event.

    Attributes:
        form: Form that raised the event
        default_prevented: Whether a listener suppressed default handling
    """
    form: "PhotoForm"
    default_prevented: bool = False

    def prevent_default(self):
        self.default_prevented = True


SubmitListener = Callable[[SubmitEvent], Awaitable[object]]


class PhotoForm:
    """
    Photo upload form.

    Attributes:
        form_id (str): Element identifier
        fields (Dict[str, str]): Raw text field values
        photos (List[FileHandle]): Selected files in order
        submit_control (SubmitControl): Submit button
        status_banner (StatusBanner): Message banner
    """

    def __init__(
        self,
        form_id: Optional[str] = None,
        fields: Optional[Dict[str, str]] = None,
        photos: Optional[List[FileHandle]] = None,
        submit_control: Optional[SubmitControl] = None,
        status_banner: Optional[StatusBanner] = None,
    ):
        self.form_id = form_id or f"photoUploadForm-{uuid.uuid4().hex[:8]}"
        self.fields = {name: "" for name in FIELD_NAMES}
        self.fields.update(fields or {})
        self.photos = list(photos or [])
        self.submit_control = submit_control or SubmitControl()
        self.status_banner = status_banner or StatusBanner()
        self._listeners: List[SubmitListener] = []

    def add_submit_listener(self, listener: SubmitListener):
        self._listeners.append(listener)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    async def dispatch_submit(self) -> Optional[SubmitEvent]:
        """
        Fire a submit event at every listener in order.

        Returns:
            SubmitEvent or None when the submit control is disabled

        Notes:
            - A disabled control cannot submit
        """
        if self.submit_control.disabled:
            logger.info(f"Submit ignored on {self.form_id}: control disabled")
            return None

        event = SubmitEvent(form=self)
        for listener in list(self._listeners):
            await listener(event)
        return event

    def reset(self):
        """Clear every field and the photo selection."""
        self.fields = {name: "" for name in FIELD_NAMES}
        self.photos = []

    @property
    def is_blank(self) -> bool:
        return not self.photos and not any(self.fields.values())


@dataclass
class HostDocument:
    """
    Document hosting one or more forms.

    Attributes:
        ready_state: "loading" until parsing finishes, then "complete"
        forms: Forms by identifier
    """
    ready_state: str = "complete"
    forms: Dict[str, PhotoForm] = field(default_factory=dict)
    _ready_callbacks: List[Callable[[], object]] = field(default_factory=list, repr=False)

    def add_form(self, form: PhotoForm):
        self.forms[form.form_id] = form

    def get_form(self, form_id: str) -> Optional[PhotoForm]:
        return self.forms.get(form_id)

    def on_ready(self, callback: Callable[[], object]):
        self._ready_callbacks.append(callback)

    def mark_ready(self):
        """Finish loading and run deferred callbacks once."""
        if self.ready_state != "loading":
            return
        self.ready_state = "complete"
        callbacks, self._ready_callbacks = self._ready_callbacks, []
        for callback in callbacks:
            callback()
