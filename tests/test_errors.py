import pytest

from voicenote.errors import (
    ApiError,
    NetworkError,
    PayloadTooLarge,
    RateLimited,
    ResourceNotFound,
    TranscriptionError,
    UnknownError,
    user_message,
)


@pytest.mark.parametrize(
    "error, code",
    [
        (ResourceNotFound("/tmp/clip.m4a"), "FILE_NOT_FOUND"),
        (RateLimited(), "RATE_LIMIT"),
        (PayloadTooLarge(), "FILE_TOO_LARGE"),
        (ApiError("boom", 500), "API_ERROR"),
        (NetworkError(OSError("reset")), "NETWORK_ERROR"),
        (UnknownError(), "UNKNOWN_ERROR"),
    ],
)
def test_every_error_has_a_code_and_base_class(error, code):
    assert isinstance(error, TranscriptionError)
    assert error.code == code
    assert str(error) == error.message


def test_rate_limited_defaults_to_15_seconds():
    error = RateLimited()
    assert error.retry_after == 15
    assert error.status_code == 429
    assert "15" in error.message


def test_payload_too_large_status():
    assert PayloadTooLarge().status_code == 413


def test_api_error_keeps_status_and_message():
    error = ApiError("Invalid file format.", 400)
    assert error.status_code == 400
    assert error.message == "Invalid file format."


def test_network_error_chains_cause():
    cause = ConnectionResetError("reset by peer")
    error = NetworkError(cause)
    assert error.cause is cause
    assert error.__cause__ is cause
    assert error.status_code is None


def test_resource_not_found_keeps_path():
    error = ResourceNotFound("/tmp/clip.m4a")
    assert error.path == "/tmp/clip.m4a"
    assert "/tmp/clip.m4a" in error.message


# ── user_message ──────────────────────────────────────────────────────────────


def test_user_message_rate_limit_includes_cooldown():
    assert "42 seconds" in user_message(RateLimited(42))


def test_user_message_api_error_includes_status_and_detail():
    text = user_message(ApiError("Invalid file format.", 400))
    assert "400" in text
    assert "Invalid file format." in text


@pytest.mark.parametrize(
    "error, fragment",
    [
        (ResourceNotFound("x"), "could not be found"),
        (PayloadTooLarge(), "too large"),
        (NetworkError(OSError()), "connection"),
        (UnknownError(), "Unknown"),
    ],
)
def test_user_message_is_kind_specific(error, fragment):
    assert fragment in user_message(error)


def test_resource_not_found_can_carry_read_failure():
    cause = PermissionError(13, "Permission denied")
    error = ResourceNotFound("/tmp/clip.m4a", cause=cause)
    assert error.code == "FILE_NOT_FOUND"
    assert error.__cause__ is cause
    assert "could not be read" in error.message
