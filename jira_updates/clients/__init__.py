"""HTTP clients for the Jira Cloud APIs."""

from .jira_api import JiraApi, create_builds_api, create_deployments_api  # noqa: F401

__all__ = ["JiraApi", "create_builds_api", "create_deployments_api"]
