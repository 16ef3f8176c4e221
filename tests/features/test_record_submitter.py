"""
Test Record Submitter

This module tests ledger submission including:
- Response interpretation (JSON, heuristic, unparseable)
- Request shape in verified mode
- Fire-and-forget mode
- Transport errors
"""

import json

import pytest

from app.features.photosubmit.constants import (
    LEDGER_GENERIC_REJECTION,
    LEDGER_GENERIC_SUCCESS,
    LEDGER_SENT_BLIND,
)
from app.features.photosubmit.models import AssetDescriptor, SubmissionRecord
from app.features.photosubmit.record_submitter import RecordSubmitter, interpret_response
from app.shared.errors import RecordRejected, ResponseUnparseable, TransportError
from app.shared.models import LedgerMode
from tests.fakes import FakeResponse, FakeSession, connection_error

LEDGER_URL = "https://ledger.example.com/exec"


@pytest.fixture
def record():
    return SubmissionRecord(
        name="Ana Ruiz",
        email="ana@x.com",
        category="ceremony",
        message="",
        timestamp="2025-05-01T10:00:00.000Z",
        images=[
            AssetDescriptor(
                url="https://res.cloudinary.com/demo/a.jpg",
                public_id="a",
                original_filename="a.jpg",
                format="jpg",
                byte_size=1234,
            )
        ],
    )


class TestInterpretResponse:
    """Test the text-then-parse-then-heuristic protocol"""

    def test_json_success(self):
        ack = interpret_response('{"success":true,"message":"ok"}')
        assert ack.success is True
        assert ack.message == "ok"

    def test_json_success_without_message(self):
        assert interpret_response('{"success": true}').message == LEDGER_GENERIC_SUCCESS

    def test_json_failure_with_error(self):
        with pytest.raises(RecordRejected) as exc_info:
            interpret_response('{"success":false,"error":"dup"}')
        assert exc_info.value.reason == "dup"

    def test_json_failure_with_message(self):
        with pytest.raises(RecordRejected) as exc_info:
            interpret_response('{"success":false,"message":"sheet locked"}')
        assert exc_info.value.reason == "sheet locked"

    def test_json_failure_without_reason(self):
        with pytest.raises(RecordRejected) as exc_info:
            interpret_response('{"status":"error"}')
        assert exc_info.value.reason == LEDGER_GENERIC_REJECTION

    @pytest.mark.parametrize("value", ['"true"', "1", '"yes"'])
    def test_truthy_success_flag_is_not_enough(self, value):
        with pytest.raises(RecordRejected):
            interpret_response('{"success": %s}' % value)

    def test_json_non_object(self):
        with pytest.raises(RecordRejected):
            interpret_response("[1, 2, 3]")

    def test_heuristic_success(self):
        ack = interpret_response("weird success=true output")
        assert ack.message == LEDGER_GENERIC_SUCCESS

    def test_heuristic_false_positive_is_kept(self):
        """Substring match accepts an error page that mentions both words"""
        ack = interpret_response("<html>success: not true at all</html>")
        assert ack.success is True

    @pytest.mark.parametrize("text", ["", "<html>Error 500</html>", "success only", "true only"])
    def test_unparseable(self, text):
        with pytest.raises(ResponseUnparseable) as exc_info:
            interpret_response(text)
        assert exc_info.value.raw_text == text


@pytest.mark.asyncio
async def test_verified_mode_request_shape(record):
    session = FakeSession([FakeResponse(200, {"success": True, "message": "ok"})])
    submitter = RecordSubmitter(ledger_url=LEDGER_URL, mode=LedgerMode.VERIFIED, session=session)

    ack = await submitter.submit(record)

    assert ack.message == "ok"
    assert len(session.calls) == 1
    call = session.calls[0]
    assert call["url"] == LEDGER_URL
    assert call["headers"]["Content-Type"] == "application/json"
    payload = json.loads(call["data"])
    assert set(payload) == {"name", "email", "category", "message", "timestamp", "images"}
    assert payload["images"] == [{
        "url": "https://res.cloudinary.com/demo/a.jpg",
        "public_id": "a",
        "original_filename": "a.jpg",
        "format": "jpg",
        "bytes": 1234,
    }]


@pytest.mark.asyncio
async def test_verified_mode_reads_body_as_text(record):
    """Body is read as text even when the status is not 2xx"""
    response = FakeResponse(500, text='{"success":false,"error":"quota"}')
    submitter = RecordSubmitter(ledger_url=LEDGER_URL, mode=LedgerMode.VERIFIED, session=FakeSession([response]))

    with pytest.raises(RecordRejected) as exc_info:
        await submitter.submit(record)

    assert exc_info.value.reason == "quota"
    assert response.read_count == 1


@pytest.mark.asyncio
async def test_verified_mode_unparseable(record):
    submitter = RecordSubmitter(
        ledger_url=LEDGER_URL,
        mode=LedgerMode.VERIFIED,
        session=FakeSession([FakeResponse(200, text="<!DOCTYPE html><p>Moved</p>")]),
    )
    with pytest.raises(ResponseUnparseable):
        await submitter.submit(record)


@pytest.mark.asyncio
async def test_verified_mode_transport_error(record):
    submitter = RecordSubmitter(ledger_url=LEDGER_URL, mode=LedgerMode.VERIFIED, session=FakeSession([connection_error()]))
    with pytest.raises(TransportError) as exc_info:
        await submitter.submit(record)
    assert exc_info.value.phase == "ledger"


@pytest.mark.asyncio
async def test_fire_and_forget_never_reads_body(record):
    response = FakeResponse(200, {"success": False, "error": "ignored"})
    session = FakeSession([response])
    submitter = RecordSubmitter(ledger_url=LEDGER_URL, mode=LedgerMode.FIRE_AND_FORGET, session=session)

    ack = await submitter.submit(record)

    assert ack.message == LEDGER_SENT_BLIND
    assert response.read_count == 0
    assert session.calls[0]["headers"]["Content-Type"] == "text/plain"
    assert json.loads(session.calls[0]["data"])["name"] == "Ana Ruiz"


@pytest.mark.asyncio
async def test_fire_and_forget_transport_error(record):
    submitter = RecordSubmitter(
        ledger_url=LEDGER_URL,
        mode=LedgerMode.FIRE_AND_FORGET,
        session=FakeSession([connection_error()]),
    )
    with pytest.raises(TransportError):
        await submitter.submit(record)


def test_mode_accepts_plain_string():
    submitter = RecordSubmitter(ledger_url=LEDGER_URL, mode="fire_and_forget", session=FakeSession())
    assert submitter.mode == LedgerMode.FIRE_AND_FORGET


def test_unknown_mode_rejected():
    with pytest.raises(ValueError):
        RecordSubmitter(ledger_url=LEDGER_URL, mode="carrier_pigeon", session=FakeSession())


@pytest.mark.asyncio
async def test_verified_mode_invalid_utf8_is_unparseable(record):
    """Undecodable bytes end as an unparseable response, not a codec error"""
    response = FakeResponse(200, raw=b"\xff\xfe garbage \x80")
    submitter = RecordSubmitter(ledger_url=LEDGER_URL, mode=LedgerMode.VERIFIED, session=FakeSession([response]))

    with pytest.raises(ResponseUnparseable) as exc_info:
        await submitter.submit(record)

    assert "garbage" in exc_info.value.raw_text


@pytest.mark.asyncio
async def test_verified_mode_invalid_utf8_heuristic_still_applies(record):
    response = FakeResponse(200, raw=b"\xffsuccess=true\x80")
    submitter = RecordSubmitter(ledger_url=LEDGER_URL, mode=LedgerMode.VERIFIED, session=FakeSession([response]))

    ack = await submitter.submit(record)

    assert ack.message == LEDGER_GENERIC_SUCCESS
