"""Error Hierarchy — verifies status codes and the REST envelope."""

from availability.core.errors import (
    AvailabilityError, DatabaseError, ErrorCategory, ErrorContext,
    ResourceNotFoundError, StoreTimeoutError, WeekConversionError,
)


def test_envelope_shape():
    err = ResourceNotFoundError(
        "Instance record", "abc/alice",
        ErrorContext(instance_id="abc", username="alice"),
    )
    body = err.to_response()["error"]
    assert body["code"] == "RESOURCE_NOT_FOUND"
    assert body["message"] == "Instance record 'abc/alice' not found"
    assert body["category"] == "resource_not_found"
    assert body["context"] == {"instance_id": "abc", "username": "alice"}
    assert "timestamp" in body


def test_store_errors_are_500():
    assert DatabaseError("boom", "insert").http_status == 500
    assert WeekConversionError("1010101").http_status == 500


def test_timeout_is_a_database_error_with_its_own_code():
    err = StoreTimeoutError("count", 10.0)
    assert isinstance(err, DatabaseError)
    assert isinstance(err, AvailabilityError)
    assert err.code == "STORE_TIMEOUT"
    assert err.category == ErrorCategory.TIMEOUT
    assert err.http_status == 500
    assert "10s" in err.message
