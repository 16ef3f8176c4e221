"""
Form Binder Module

One-time wiring of a submission controller to a form's submit event.
The binder owns the record of which forms are already bound, so
initializing the same form twice attaches a single handler.

Author: Photo Intake Development Team
"""

import logging
import weakref
from typing import Callable, Optional

from .controller import SubmissionController
from .form import HostDocument, PhotoForm

logger = logging.getLogger(__name__)


class FormBinder:
    """
    Submit handler registry.

    Each bound form gets its own controller from the factory.

    Attributes:
        controller_factory: Builds the controller for a newly bound form
    """

    def __init__(self, controller_factory: Callable[[], SubmissionController]):
        self.controller_factory = controller_factory
        self._bound: "weakref.WeakKeyDictionary[PhotoForm, SubmissionController]" = weakref.WeakKeyDictionary()

    def initialize(self, form: Optional[PhotoForm]) -> bool:
        """
        Attach the submit handler to a form once.

        Args:
            form: Form to wire, may be None when it was not found

        Returns:
            bool: True when a handler was attached by this call
        """
        logger.info("Initializing form...")
        if form is None:
            logger.error("Form not found")
            return False

        if form in self._bound:
            logger.info(f"Form {form.form_id} already initialized - skipping")
            return False

        controller = self.controller_factory()
        self._bound[form] = controller
        form.add_submit_listener(controller.handle_submit)
        logger.info(f"Form {form.form_id} ready to receive photos")
        return True

    def bind(self, document: HostDocument, form_id: str):
        """Initialize now, or once the document finishes loading."""
        if document.ready_state == "loading":
            document.on_ready(lambda: self.initialize(document.get_form(form_id)))
            return
        self.initialize(document.get_form(form_id))

    def is_bound(self, form: PhotoForm) -> bool:
        return form in self._bound

    def controller_for(self, form: PhotoForm) -> Optional[SubmissionController]:
        return self._bound.get(form)
