"""
jira_updates package
--------------------

Client for submitting build and deployment updates to Jira Cloud.
:class:`JiraApi` performs one request/response cycle per call and
returns an :class:`UpdateResult` instead of raising.
"""

from .clients.jira_api import JiraApi, create_builds_api, create_deployments_api  # noqa: F401
from .schemas.result import UpdateErrorKind, UpdateResult  # noqa: F401

__all__ = [
    "JiraApi",
    "UpdateErrorKind",
    "UpdateResult",
    "create_builds_api",
    "create_deployments_api",
]
