"""
Pydantic schemas for the Jira update client.

``result`` holds the uniform :class:`UpdateResult` returned by the
client; ``builds`` and ``deployments`` describe the payloads and
responses of the two Jira APIs the client is used with.
"""

from .result import ApiUpdateFailedError, UpdateErrorKind, UpdateResult

__all__ = ["ApiUpdateFailedError", "UpdateErrorKind", "UpdateResult"]
