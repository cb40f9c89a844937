"""
core/codec.py
--------------

JSON codec used by the update client.

Encoding goes through ``pydantic_core.to_json`` so that pydantic
models, dataclasses, plain dicts, dates and enums are all rendered the
same way.  Decoding validates the raw body against a caller supplied
type with a ``pydantic.TypeAdapter``.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Type, TypeVar

from pydantic import TypeAdapter
from pydantic_core import PydanticSerializationError, to_json

T = TypeVar("T")

_UNKNOWN_TYPE_MARKER = "Unable to serialize unknown type"


class PayloadEncodingError(Exception):
    """The encoder failed while rendering an otherwise supported value."""


class PayloadNotSerializableError(PayloadEncodingError):
    """The value (or something nested in it) has no JSON representation."""


@lru_cache(maxsize=128)
def _cached_adapter(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


def _adapter_for(response_type: Any) -> TypeAdapter:
    try:
        return _cached_adapter(response_type)
    except TypeError:
        # unhashable type descriptors cannot go through the cache
        return TypeAdapter(response_type)


class JsonCodec:
    """Encode request payloads and decode response bodies."""

    def __init__(self, *, by_alias: bool = True, exclude_none: bool = True) -> None:
        self.by_alias = by_alias
        self.exclude_none = exclude_none

    def encode(self, value: Any) -> bytes:
        """Render ``value`` as UTF‑8 JSON.

        :raises PayloadNotSerializableError: a value of an unsupported type was found
        :raises PayloadEncodingError: the encoder failed for any other reason
        """
        try:
            return to_json(value, by_alias=self.by_alias, exclude_none=self.exclude_none)
        except PydanticSerializationError as exc:
            # to_json wraps every encoder failure; only unknown types are caller defects
            if _UNKNOWN_TYPE_MARKER in str(exc):
                raise PayloadNotSerializableError(str(exc)) from exc
            raise PayloadEncodingError(str(exc)) from exc
        except (ValueError, TypeError, RecursionError) as exc:
            raise PayloadEncodingError(str(exc)) from exc

    def decode(self, data: bytes, response_type: Type[T]) -> T:
        """Validate ``data`` as JSON against ``response_type``.

        :raises pydantic.ValidationError: the body does not match the type
        """
        return _adapter_for(response_type).validate_json(data)
