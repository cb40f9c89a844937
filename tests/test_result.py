"""
UpdateResult tests: exactly one arm populated, immutability.
"""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from jira_updates.schemas.result import ApiUpdateFailedError, UpdateErrorKind, UpdateResult


def test_success_result():
    result = UpdateResult.success({"id": 42})
    assert result.is_success
    assert result.value == {"id": 42}
    assert result.error is None
    assert result.error_kind is None


def test_failure_result():
    result = UpdateResult.failure("nope", UpdateErrorKind.TRANSPORT_ERROR)
    assert not result.is_success
    assert result.value is None
    assert result.error == "nope"
    assert result.error_kind is UpdateErrorKind.TRANSPORT_ERROR


def test_both_arms_is_invalid():
    with pytest.raises(ValidationError):
        UpdateResult(value=1, error="nope", error_kind=UpdateErrorKind.UNEXPECTED_ERROR)


def test_error_without_kind_is_invalid():
    with pytest.raises(ValidationError):
        UpdateResult(error="nope")


def test_kind_without_error_is_invalid():
    with pytest.raises(ValidationError):
        UpdateResult(error_kind=UpdateErrorKind.REJECTED_STATUS)


def test_result_is_frozen():
    result = UpdateResult.success(1)
    with pytest.raises(ValidationError):
        result.value = 2


def test_api_update_failed_error_carries_kind():
    err = ApiUpdateFailedError("bad", UpdateErrorKind.EMPTY_RESPONSE_BODY)
    assert str(err) == "bad"
    assert err.message == "bad"
    assert err.kind is UpdateErrorKind.EMPTY_RESPONSE_BODY
