"""
JsonCodec tests: aliases, dropped None fields, supported value kinds
and the two encoding error classes.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List

import pytest
from pydantic import ValidationError

from jira_updates.core.codec import JsonCodec, PayloadEncodingError, PayloadNotSerializableError
from jira_updates.schemas.builds import BuildKeyResponse
from jira_updates.schemas.common import ProviderMetadata


@dataclass
class Marker:
    name: str
    at: datetime


def test_encode_uses_aliases_and_drops_none():
    codec = JsonCodec()
    data = json.loads(codec.encode(BuildKeyResponse(pipeline_id="p-1", build_number=3)))
    assert data == {"pipelineId": "p-1", "buildNumber": 3}
    assert json.loads(codec.encode(ProviderMetadata())) == {}


def test_encode_dataclass_and_datetime():
    at = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
    data = json.loads(JsonCodec().encode(Marker(name="m", at=at)))
    assert data == {"name": "m", "at": "2024-05-01T12:00:00Z"}


def test_encode_unknown_type_is_not_serializable():
    with pytest.raises(PayloadNotSerializableError):
        JsonCodec().encode({"value": object()})


def test_not_serializable_is_an_encoding_error():
    assert issubclass(PayloadNotSerializableError, PayloadEncodingError)


def test_decode_into_generic_list():
    assert JsonCodec().decode(b"[1, 2, 3]", List[int]) == [1, 2, 3]


def test_decode_accepts_camel_case_body():
    key = JsonCodec().decode(b'{"pipelineId": "p-1", "buildNumber": 9}', BuildKeyResponse)
    assert key.pipeline_id == "p-1"
    assert key.build_number == 9


def test_decode_rejects_mismatched_body():
    with pytest.raises(ValidationError):
        JsonCodec().decode(b'{"pipelineId": "p-1"}', BuildKeyResponse)


def test_circular_container_is_an_encoding_error():
    payload: dict = {"name": "loop"}
    payload["self"] = payload
    with pytest.raises(PayloadEncodingError) as excinfo:
        JsonCodec().encode(payload)
    assert not isinstance(excinfo.value, PayloadNotSerializableError)


def test_invalid_utf8_bytes_are_an_encoding_error():
    with pytest.raises(PayloadEncodingError) as excinfo:
        JsonCodec().encode({"blob": b"\xff\xfe"})
    assert not isinstance(excinfo.value, PayloadNotSerializableError)
