"""
Test Form Binder

This module tests form wiring including:
- Idempotent initialization
- Missing form handling
- Deferred binding until the document is ready
- Disabled control blocking resubmission
"""

import pytest

from app.features.photosubmit.controller import SubmissionController
from app.features.photosubmit.form import HostDocument, PhotoForm
from app.features.photosubmit.form_binder import FormBinder
from app.shared.models import OutcomeKind


class CountingController:
    """Controller stand-in counting submit invocations."""

    def __init__(self):
        self.calls = 0

    async def handle_submit(self, event):
        event.prevent_default()
        self.calls += 1


@pytest.fixture
def controller():
    return CountingController()


@pytest.fixture
def binder(controller):
    return FormBinder(lambda: controller)


@pytest.mark.asyncio
async def test_double_initialize_binds_once(binder, controller):
    """Binding twice still runs the controller once per submit"""
    form = PhotoForm(form_id="photoUploadForm")

    assert binder.initialize(form) is True
    assert binder.initialize(form) is False

    await form.dispatch_submit()

    assert controller.calls == 1
    assert form.listener_count == 1
    assert binder.is_bound(form)


def test_missing_form(binder):
    assert binder.initialize(None) is False


def test_each_form_gets_its_own_controller():
    binder = FormBinder(CountingController)
    first, second = PhotoForm(), PhotoForm()

    binder.initialize(first)
    binder.initialize(second)

    assert binder.controller_for(first) is not binder.controller_for(second)


def test_bind_when_document_ready(binder):
    form = PhotoForm(form_id="photoUploadForm")
    document = HostDocument(ready_state="complete")
    document.add_form(form)

    binder.bind(document, "photoUploadForm")

    assert binder.is_bound(form)


def test_bind_deferred_while_loading(binder):
    form = PhotoForm(form_id="photoUploadForm")
    document = HostDocument(ready_state="loading")
    document.add_form(form)

    binder.bind(document, "photoUploadForm")
    binder.bind(document, "photoUploadForm")
    assert not binder.is_bound(form)

    document.mark_ready()

    assert binder.is_bound(form)
    assert form.listener_count == 1

    document.mark_ready()
    assert form.listener_count == 1


def test_bind_unknown_form_id(binder):
    document = HostDocument()
    binder.bind(document, "missing")
    assert document.forms == {}


@pytest.mark.asyncio
async def test_disabled_control_blocks_submit(binder, controller):
    form = PhotoForm()
    binder.initialize(form)
    form.submit_control.disabled = True

    assert await form.dispatch_submit() is None
    assert controller.calls == 0


@pytest.mark.asyncio
async def test_bound_real_controller_reports_outcome(make_file):
    """Dispatching through a real controller leaves the outcome on the controller"""
    binder = FormBinder(lambda: SubmissionController(uploader=object(), submitter=object()))
    form = PhotoForm(fields={"name": "Ana Ruiz"}, photos=[make_file()])
    binder.initialize(form)

    await form.dispatch_submit()

    assert binder.controller_for(form).last_outcome.kind == OutcomeKind.VALIDATION_REJECTED
