"""
Cloudinary Integration Module

This module provides integration with Cloudinary for photo storage and
content delivery using unsigned (preset-based) uploads.

Features:
- Single-file multipart upload
- Upload URL construction
- Error body capture
- Transport error mapping

Data Model:
- Upload preset
- Cloud name
- Secure URLs
- Public IDs
- File metadata

Security:
- Public upload preset only
- No API secret on this side

Dependencies:
- aiohttp for async HTTP
- config for credentials
- logging for tracking

Author: Photo Intake Development Team
"""

import asyncio
import logging
from typing import Any, Dict, Optional

import aiohttp

from app.shared import config
from app.shared.errors import TransportError, UploadFailed

logger = logging.getLogger(__name__)


class CloudinaryCDN:
    """
    Cloudinary service integration.

    Uploads one file per call to the unsigned upload endpoint.

    Attributes:
        cloud_name: Cloudinary account segment
        upload_preset: Public upload-authorization token
        api_base: Storage host
    """

    def __init__(
        self,
        cloud_name: Optional[str] = None,
        upload_preset: Optional[str] = None,
        api_base: Optional[str] = None,
    ):
        """
        Initialize Cloudinary client.

        Notes:
            - Falls back to config values
            - Logs setup
        """
        self.cloud_name = cloud_name or config.CLOUDINARY_CLOUD_NAME
        self.upload_preset = upload_preset or config.CLOUDINARY_UPLOAD_PRESET
        self.api_base = (api_base or config.CLOUDINARY_API_BASE).rstrip('/')
        logger.info("Cloudinary initialized with:")
        logger.info(f"Cloud name: {self.cloud_name}")
        logger.info(f"Upload URL: {self.upload_url}")

    @property
    def upload_url(self) -> str:
        return f"{self.api_base}/v1_1/{self.cloud_name}/upload"

    def build_form(self, filename: str, content: bytes, content_type: Optional[str] = None) -> aiohttp.FormData:
        """Multipart body with the binary content and the upload preset."""
        form = aiohttp.FormData()
        form.add_field(
            'file',
            content,
            filename=filename,
            content_type=content_type or 'application/octet-stream',
        )
        form.add_field('upload_preset', self.upload_preset)
        return form

    async def upload_file(
        self,
        session: aiohttp.ClientSession,
        filename: str,
        content: bytes,
        content_type: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Upload a single file.

        Args:
            session: Open HTTP session
            filename: Local file name
            content: Binary content
            content_type: Declared MIME type

        Returns:
            dict: Storage response body

        Raises:
            UploadFailed: Non-2xx status, unreadable success body or no URL
            TransportError: Storage unreachable

        Notes:
            - One POST, never retried
            - Error body is read before raising
        """
        form = self.build_form(filename, content, content_type)
        try:
            async with session.post(self.upload_url, data=form) as response:
                if not 200 <= response.status < 300:
                    error_text = await response.text(errors="replace")
                    logger.error(f"Cloudinary error ({response.status}) for {filename}: {error_text}")
                    raise UploadFailed(response.status, filename, error_text)

                try:
                    data = await response.json(content_type=None)
                except ValueError:
                    raise UploadFailed(response.status, filename, "invalid JSON in upload response")
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Network error uploading {filename}: {str(e)}")
            raise TransportError("upload", e) from e

        if not isinstance(data, dict):
            raise UploadFailed(response.status, filename, "unexpected upload response shape")

        if not (data.get('secure_url') or data.get('url')):
            raise UploadFailed(response.status, filename, "upload response has no URL")

        logger.info(f"Image uploaded: {data.get('secure_url') or data.get('url')}")
        return data
