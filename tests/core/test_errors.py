"""Error Hierarchy - tests for kinds, HTTP status and response envelopes.

Tests cover:
    - each domain error carries its MessageKind and HTTP status
    - to_variant produces the tagged {kind: message} form
    - InvalidPayloadError.from_errors aggregates messages
    - DatabaseError is infrastructure (no kind, 503)
"""

from dataclasses import fields

import pytest

from datamart.core.domain_types import MessageKind
from datamart.core.errors import (
    AuthenticationFailedError,
    DatabaseError,
    DatamartError,
    ErrorContext,
    InvalidPayloadError,
    NotFoundError,
    PaymentCompletedError,
    PaymentFailedError,
)


@pytest.mark.parametrize("cls,kind,http_status", [
    (NotFoundError, MessageKind.NOT_FOUND, 404),
    (InvalidPayloadError, MessageKind.INVALID_PAYLOAD, 400),
    (AuthenticationFailedError, MessageKind.AUTHENTICATION_FAILED, 403),
    (PaymentFailedError, MessageKind.PAYMENT_FAILED, 402),
    (PaymentCompletedError, MessageKind.PAYMENT_COMPLETED, 409),
])
def test_domain_errors_carry_kind_and_status(cls, kind, http_status):
    err = cls("boom")
    assert isinstance(err, DatamartError)
    assert err.kind is kind
    assert err.http_status == http_status
    assert err.to_variant() == {kind.value: "boom"}


def test_from_errors_aggregates_messages():
    err = InvalidPayloadError.from_errors(["a bad", "b bad"])
    assert err.errors == ["a bad", "b bad"]
    assert err.message == "Invalid payload. Errors=[a bad, b bad]"


def test_to_response_envelope():
    err = NotFoundError("gone", ErrorContext(record_id="r1"))
    body = err.to_response()["error"]
    assert body["code"] == "NOT_FOUND"
    assert body["kind"] == "NotFound"
    assert body["message"] == "gone"
    assert body["category"] == "resource_not_found"
    assert body["variant"] == {"NotFound": "gone"}
    assert "timestamp" in body


def test_database_error_has_no_kind():
    err = DatabaseError("Connection lost", "execute")
    assert err.kind is None
    assert err.http_status == 503
    assert err.message == "Database execute failed: Connection lost"
    assert err.to_variant() == {"DATABASE_ERROR": err.message}


def test_error_context_carries_only_read_fields():
    assert [f.name for f in fields(ErrorContext)] == [
        "timestamp", "record_id", "caller",
    ]
    ctx = ErrorContext(record_id="r1", caller="alice")
    assert AuthenticationFailedError("no", ctx).context.caller == "alice"
