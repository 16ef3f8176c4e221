"""
Photo Submission API Routes Module

This module exposes the photo submission pipeline over HTTP. Each request
becomes one form submission: the multipart fields fill a PhotoForm, the
form is wired through the FormBinder, and the resulting banner state is
returned to the caller.

Features:
- Multipart photo submission endpoint
- Health endpoint
- Outcome to HTTP status mapping

Data Model:
- Uploader name and email
- Category and message
- Up to five photos

Security:
- Size and count limits enforced before any network call
- No authentication (public intake form)

Dependencies:
- FastAPI for routing
- Pydantic for the response model
- FormBinder / SubmissionController for the pipeline

Author: Photo Intake Development Team
"""

import logging
from functools import lru_cache
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import JSONResponse

from app.shared import config
from .asset_uploader import AssetUploader
from .constants import MAX_PHOTO_BYTES, MAX_PHOTOS, OUTCOME_HTTP_STATUS
from .controller import SubmissionController
from .form import PhotoForm
from .form_binder import FormBinder
from .models import FileHandle, SubmitResponse
from .record_submitter import RecordSubmitter

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/photosubmit", tags=["photosubmit"])


@lru_cache()
def get_form_binder() -> FormBinder:
    """Process-wide binder; uploader and ledger client are shared, controllers are per form."""
    uploader = AssetUploader()
    submitter = RecordSubmitter()
    return FormBinder(lambda: SubmissionController(uploader=uploader, submitter=submitter))


async def read_photos(
    photos: Optional[List[UploadFile]],
    max_photos: int = MAX_PHOTOS,
    max_photo_bytes: int = MAX_PHOTO_BYTES,
) -> List[FileHandle]:
    """
    Turn uploaded parts into file handles without holding more than the limits allow.

    Notes:
        - Over the count limit, or with a part declared too large, nothing is read
        - Other parts are read at most one byte past the size limit
        - Unread parts keep their declared size so validation can name them
    """
    # Browsers send an empty part when no file is chosen
    parts = [photo for photo in photos or [] if photo.filename]
    within_limits = len(parts) <= max_photos and all(
        photo.size is None or photo.size <= max_photo_bytes for photo in parts
    )

    handles = []
    for photo in parts:
        if not within_limits:
            handles.append(FileHandle(name=photo.filename, size=photo.size or 0, content_type=photo.content_type))
            continue
        content = await photo.read(max_photo_bytes + 1)
        handles.append(FileHandle.from_bytes(photo.filename, content, photo.content_type))
    return handles


@router.post("/submit", response_model=SubmitResponse)
async def submit_photos(
    name: str = Form(""),
    email: str = Form(""),
    category: str = Form(""),
    message: str = Form(""),
    photos: Optional[List[UploadFile]] = File(None),
    binder: FormBinder = Depends(get_form_binder),
):
    """
    Submit photos and metadata.

    Args:
        name (str): Uploader full name
        email (str): Uploader email
        category (str): Photo category
        message (str): Optional message
        photos (List[UploadFile]): Selected photos
        binder (FormBinder): Handler registry

    Returns:
        JSONResponse: SubmitResponse body with the outcome's HTTP status

    Notes:
        - One form per request
        - Every outcome is a normal response, never an exception
    """
    form = PhotoForm(
        fields={"name": name, "email": email, "category": category, "message": message},
        photos=await read_photos(photos),
    )
    binder.initialize(form)
    await form.dispatch_submit()

    outcome = binder.controller_for(form).last_outcome
    body = SubmitResponse(
        success=outcome.succeeded,
        outcome=outcome.kind,
        message=form.status_banner.text,
        css_class=form.status_banner.css_class,
        form_cleared=outcome.succeeded and form.is_blank,
    )
    return JSONResponse(status_code=OUTCOME_HTTP_STATUS[outcome.kind], content=body.model_dump(mode="json"))


@router.get("/health")
async def health():
    return {"status": "ok", "ledger_mode": config.LEDGER_MODE.value}
