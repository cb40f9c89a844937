"""
schemas/common.py
------------------

Base model and small shapes shared by the Builds and Deployments
schemas.  Jira uses camelCase on the wire; the models expose
snake_case attributes and accept either spelling on input.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class JiraModel(BaseModel):
    """Base class for all Jira wire models."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProviderMetadata(JiraModel):
    """Identifies the tool that produced the update (e.g. ``jenkins``)."""

    product: Optional[str] = None


class ApiErrorResponse(JiraModel):
    message: str
    error_trace_id: Optional[str] = None
