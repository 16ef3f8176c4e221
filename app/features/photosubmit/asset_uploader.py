"""
Asset Uploader Module

This module uploads the photos of one submission to object storage,
strictly one after another in selection order.

Features:
- Sequential uploads
- Per-file progress logging
- Descriptor extraction
- Abort on first failure

Data Model:
- File handles in
- Asset descriptors out

Dependencies:
- aiohttp for the HTTP session
- CloudinaryCDN for the single-file upload
- logging for tracking

Author: Photo Intake Development Team
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

import aiohttp

from app.shared.cloudinary_cdn import CloudinaryCDN
from .models import AssetDescriptor, FileHandle

logger = logging.getLogger(__name__)


class AssetUploader:
    """
    Sequential photo uploader.

    Attributes:
        cdn: Storage client
        session: Optional shared HTTP session; a private one is opened per
            call when absent
    """

    def __init__(self, cdn: Optional[CloudinaryCDN] = None, session: Optional[aiohttp.ClientSession] = None):
        self.cdn = cdn or CloudinaryCDN()
        self.session = session

    async def upload(self, files: Sequence[FileHandle]) -> List[AssetDescriptor]:
        """
        Upload every file in order.

        Args:
            files: Photos to upload

        Returns:
            List[AssetDescriptor]: One descriptor per file, same order

        Raises:
            UploadFailed: Storage rejected a file
            TransportError: Storage unreachable

        Notes:
            - Never parallel
            - Files after a failure are not attempted
            - Already-stored assets are dropped on failure
        """
        if self.session is not None:
            return await self._upload_all(self.session, files)

        # Unbounded total timeout: a hung upload blocks until the peer gives up
        timeout = aiohttp.ClientTimeout(total=None)
        async with aiohttp.ClientSession(timeout=timeout) as session:
            return await self._upload_all(session, files)

    async def _upload_all(self, session, files: Sequence[FileHandle]) -> List[AssetDescriptor]:
        uploaded: List[AssetDescriptor] = []
        total = len(files)
        for index, file in enumerate(files, start=1):
            logger.info(f"Uploading photo {index}/{total}: {file.name}")
            data = await self.cdn.upload_file(session, file.name, file.content, file.content_type)
            uploaded.append(to_descriptor(data, file))
        logger.info(f"Cloudinary OK: {len(uploaded)} images")
        return uploaded


def to_descriptor(data: Dict[str, Any], file: FileHandle) -> AssetDescriptor:
    """Map a storage response body to a descriptor."""
    return AssetDescriptor(
        url=data.get("secure_url") or data.get("url"),
        public_id=data.get("public_id") or "",
        original_filename=data.get("original_filename") or file.name,
        format=data.get("format") or "",
        byte_size=data.get("bytes") or 0,
    )
