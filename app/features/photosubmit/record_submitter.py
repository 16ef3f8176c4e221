"""
Record Submitter Module

This module posts the submission record to the ledger endpoint (a
spreadsheet-backed script) and interprets whatever comes back.

Features:
- JSON serialization of the record
- Verified mode: raw text, then strict JSON, then success heuristic
- Fire-and-forget mode: text/plain POST, response never read
- Transport error mapping

Data Model:
- Submission record in
- Ledger acknowledgement out

Notes:
    The ledger does not always answer with clean JSON. The body is
    captured as text before any parse attempt so the heuristic still has
    it when parsing fails. The heuristic is a plain substring check and
    can be fooled by an error text containing both words; it is kept as
    is until the endpoint owner pins down the response contract.

Dependencies:
- aiohttp for async HTTP
- json for parsing
- logging for tracking

Author: Photo Intake Development Team
"""

import asyncio
import json
import logging
from typing import Optional

import aiohttp

from app.shared import config
from app.shared.errors import RecordRejected, ResponseUnparseable, TransportError
from app.shared.models import LedgerMode
from .constants import LEDGER_GENERIC_REJECTION, LEDGER_GENERIC_SUCCESS, LEDGER_SENT_BLIND
from .models import LedgerAck, SubmissionRecord

logger = logging.getLogger(__name__)

SUCCESS_FLAG_TOKEN = "success"
TRUE_VALUE_TOKEN = "true"


def interpret_response(raw_text: str) -> LedgerAck:
    """
    Turn a ledger response body into an acknowledgement.

    Args:
        raw_text: Body exactly as received

    Returns:
        LedgerAck: When the ledger accepted the record

    Raises:
        RecordRejected: Parsed answer without a boolean true success flag
        ResponseUnparseable: Not JSON and no success/true substrings
    """
    try:
        parsed = json.loads(raw_text)
    except ValueError:
        if SUCCESS_FLAG_TOKEN in raw_text and TRUE_VALUE_TOKEN in raw_text:
            logger.warning("Ledger response is not JSON; accepted by success heuristic")
            return LedgerAck(message=LEDGER_GENERIC_SUCCESS)
        raise ResponseUnparseable(raw_text)

    if not isinstance(parsed, dict):
        raise RecordRejected(LEDGER_GENERIC_REJECTION)

    if parsed.get("success") is True:
        return LedgerAck(message=_text_or(parsed.get("message"), LEDGER_GENERIC_SUCCESS))

    reason = _text_or(parsed.get("error"), None) or _text_or(parsed.get("message"), LEDGER_GENERIC_REJECTION)
    raise RecordRejected(reason)


def _text_or(value, default: Optional[str]) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value
    return default


class RecordSubmitter:
    """
    Ledger client.

    Attributes:
        ledger_url: Ledger endpoint
        mode: Transport policy
        session: Optional shared HTTP session
    """

    def __init__(
        self,
        ledger_url: Optional[str] = None,
        mode: Optional[LedgerMode] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        self.ledger_url = ledger_url or config.LEDGER_URL
        self.mode = LedgerMode(mode or config.LEDGER_MODE)
        self.session = session
        logger.info(f"Ledger target: {self.ledger_url} (mode={self.mode.value})")

    async def submit(self, record: SubmissionRecord) -> LedgerAck:
        """
        Send one record to the ledger.

        Args:
            record: Record built after all uploads succeeded

        Returns:
            LedgerAck: Success acknowledgement

        Raises:
            RecordRejected: Ledger reported failure
            ResponseUnparseable: Ledger answer could not be interpreted
            TransportError: Ledger unreachable
        """
        logger.info(
            f"Sending to ledger: name={record.name}, email={record.email}, images={len(record.images)}"
        )
        body = json.dumps(record.to_payload())

        if self.session is not None:
            return await self._post(self.session, body)

        timeout = aiohttp.ClientTimeout(total=None)
        async with aiohttp.ClientSession(timeout=timeout) as session:
            return await self._post(session, body)

    async def _post(self, session, body: str) -> LedgerAck:
        if self.mode == LedgerMode.FIRE_AND_FORGET:
            return await self._post_blind(session, body)
        return await self._post_verified(session, body)

    async def _post_verified(self, session, body: str) -> LedgerAck:
        try:
            async with session.post(
                self.ledger_url,
                data=body,
                headers={"Content-Type": "application/json"},
            ) as response:
                # Undecodable bytes become U+FFFD so the heuristic still sees the body
                raw_text = await response.text(errors="replace")
                status = response.status
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Error sending to ledger: {str(e)}")
            raise TransportError("ledger", e) from e

        logger.debug(f"Ledger responded {status}: {raw_text}")
        return interpret_response(raw_text)

    async def _post_blind(self, session, body: str) -> LedgerAck:
        # text/plain keeps the request "simple" for the script host; the body is never read
        try:
            async with session.post(
                self.ledger_url,
                data=body,
                headers={"Content-Type": "text/plain"},
            ):
                pass
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Error sending to ledger: {str(e)}")
            raise TransportError("ledger", e) from e

        logger.info("Ledger request sent (fire-and-forget)")
        return LedgerAck(message=LEDGER_SENT_BLIND)
