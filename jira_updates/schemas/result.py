"""
schemas/result.py
------------------

Uniform result type returned by :class:`~jira_updates.clients.jira_api.JiraApi`.

A result holds either the decoded response (success) or a readable
error message together with the category of the failure.  Callers
branch on :attr:`UpdateResult.is_success` instead of catching
exceptions.
"""

from __future__ import annotations

from enum import Enum
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, model_validator

T = TypeVar("T")


class UpdateErrorKind(str, Enum):
    """Failure categories, from most to least specific."""

    PAYLOAD_NOT_SERIALIZABLE = "payload_not_serializable"
    PAYLOAD_ENCODING_ERROR = "payload_encoding_error"
    TRANSPORT_ERROR = "transport_error"
    REJECTED_STATUS = "rejected_status"
    EMPTY_RESPONSE_BODY = "empty_response_body"
    UNEXPECTED_ERROR = "unexpected_error"


class ApiUpdateFailedError(Exception):
    """Raised inside the client when a submission cannot succeed.

    Never leaves :meth:`JiraApi.post_update`; it is converted into a
    failed :class:`UpdateResult` there.
    """

    def __init__(self, message: str, kind: UpdateErrorKind) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind


class UpdateResult(BaseModel, Generic[T]):
    """Outcome of a single update submission.

    Exactly one arm is populated: ``value`` on success, ``error`` and
    ``error_kind`` on failure.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: Optional[T] = None
    error: Optional[str] = None
    error_kind: Optional[UpdateErrorKind] = None

    @model_validator(mode="after")
    def _check_single_arm(self) -> "UpdateResult[T]":
        if self.error is None:
            if self.error_kind is not None:
                raise ValueError("error_kind requires an error message")
        else:
            if self.value is not None:
                raise ValueError("a result cannot carry both a value and an error")
            if self.error_kind is None:
                raise ValueError("a failed result needs an error_kind")
        return self

    @classmethod
    def success(cls, value: T) -> "UpdateResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, message: str, kind: UpdateErrorKind) -> "UpdateResult[T]":
        return cls(error=message, error_kind=kind)

    @property
    def is_success(self) -> bool:
        return self.error is None
