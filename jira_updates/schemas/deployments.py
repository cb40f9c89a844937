"""
schemas/deployments.py
-----------------------

Request and response models for the Jira Deployments API
(``POST /jira/deployments/0.1/cloud/{cloudId}/bulk``).
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import Field

from .common import ApiErrorResponse, JiraModel, ProviderMetadata

DeploymentState = Literal[
    "unknown", "pending", "in_progress", "cancelled", "failed", "rolled_back", "successful"
]
EnvironmentType = Literal["unmapped", "development", "testing", "staging", "production"]


class Environment(JiraModel):
    id: str
    display_name: str
    type: EnvironmentType


class Pipeline(JiraModel):
    id: str
    display_name: str
    url: str


class Association(JiraModel):
    """Links a deployment to Jira entities, e.g. ``issueIdOrKeys``."""

    association_type: str
    values: List[str]


class JiraDeploymentInfo(JiraModel):
    schema_version: str = "1.0"
    deployment_sequence_number: int
    update_sequence_number: int
    associations: List[Association] = Field(default_factory=list)
    display_name: str
    url: str
    description: Optional[str] = None
    last_updated: datetime
    label: Optional[str] = None
    state: DeploymentState
    pipeline: Pipeline
    environment: Environment


class DeploymentsRequest(JiraModel):
    provider_metadata: Optional[ProviderMetadata] = None
    deployments: List[JiraDeploymentInfo]


class DeploymentKeyResponse(JiraModel):
    pipeline_id: str
    environment_id: str
    deployment_sequence_number: int


class RejectedDeploymentResponse(JiraModel):
    key: DeploymentKeyResponse
    errors: List[ApiErrorResponse] = Field(default_factory=list)


class DeploymentApiResponse(JiraModel):
    """Body returned by the Deployments API on a 2xx response."""

    accepted_deployments: List[DeploymentKeyResponse] = Field(default_factory=list)
    rejected_deployments: List[RejectedDeploymentResponse] = Field(default_factory=list)
    unknown_issue_keys: List[str] = Field(default_factory=list)
    unknown_associations: List[Association] = Field(default_factory=list)
