"""
Tests for the error taxonomy and structured error responses.
"""

import pytest

from elogbook.domain.errors import (
    ERROR_MESSAGES,
    ApplicationError,
    DomainError,
    DownloadAuthorizationError,
    ErrorCategory,
    ExpiredClientError,
    FileUnavailableError,
    UnknownClientError,
    UnknownOrConsumedTokenError,
    create_error_response,
)


def test_every_category_has_messages():
    for category in ErrorCategory:
        info = ERROR_MESSAGES[category]
        assert info["title"] and info["message"] and info["action"]


@pytest.mark.parametrize(
    "error_class",
    [UnknownClientError, ExpiredClientError, UnknownOrConsumedTokenError, FileUnavailableError],
)
def test_download_errors_share_base(error_class):
    error = error_class("boom")
    assert isinstance(error, DownloadAuthorizationError)
    assert isinstance(error, DomainError)
    assert str(error) == "boom"


def test_domain_error_keeps_original():
    cause = OSError("no such file")
    error = FileUnavailableError("cannot open", original_error=cause)
    assert error.original_error is cause


def test_application_error_to_dict():
    error = ApplicationError(ErrorCategory.UNKNOWN_TOKEN, "token abc consumed")

    body = error.to_dict()

    assert body["error"] == "unknown_token"
    assert body["title"] == ERROR_MESSAGES[ErrorCategory.UNKNOWN_TOKEN]["title"]
    assert error.technical_message == "token abc consumed"


def test_create_error_response_status():
    body, status = create_error_response(ErrorCategory.EXPIRED_CLIENT, status_code=400)
    assert status == 400
    assert body["error"] == "expired_client"

    body, status = create_error_response(ErrorCategory.FILE_UNAVAILABLE, status_code=500)
    assert status == 500
    assert body["error"] == "file_unavailable"
