"""
schemas/builds.py
------------------

Request and response models for the Jira Builds API
(``POST /jira/builds/0.1/cloud/{cloudId}/bulk``).

``BuildsRequest`` is what callers hand to
:meth:`JiraApi.post_update`; ``BuildApiResponse`` is the matching
``response_type``.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import Field

from .common import ApiErrorResponse, JiraModel, ProviderMetadata

BuildState = Literal["pending", "in_progress", "successful", "failed", "cancelled", "unknown"]


class TestInfo(JiraModel):
    """Summary of the test run attached to a build."""

    __test__ = False  # keep pytest from collecting this model

    total_number: int
    number_passed: int
    number_failed: int
    number_skipped: int = 0


class BuildReference(JiraModel):
    commit_id: Optional[str] = None
    repository_uri: Optional[str] = None
    ref_name: Optional[str] = None
    ref_uri: Optional[str] = None


class JiraBuildInfo(JiraModel):
    schema_version: str = "1.0"
    pipeline_id: str
    build_number: int
    update_sequence_number: int
    display_name: str
    description: Optional[str] = None
    label: Optional[str] = None
    url: str
    state: BuildState
    last_updated: datetime
    issue_keys: List[str] = Field(default_factory=list)
    test_info: Optional[TestInfo] = None
    references: Optional[List[BuildReference]] = None


class BuildsRequest(JiraModel):
    provider_metadata: Optional[ProviderMetadata] = None
    builds: List[JiraBuildInfo]


class BuildKeyResponse(JiraModel):
    pipeline_id: str
    build_number: int


class RejectedBuildResponse(JiraModel):
    key: BuildKeyResponse
    errors: List[ApiErrorResponse] = Field(default_factory=list)


class BuildApiResponse(JiraModel):
    """Body returned by the Builds API on a 2xx response."""

    accepted_builds: List[BuildKeyResponse] = Field(default_factory=list)
    rejected_builds: List[RejectedBuildResponse] = Field(default_factory=list)
    unknown_issue_keys: List[str] = Field(default_factory=list)
