"""
core/config.py
----------------

Client configuration module.

Defines strongly‑typed settings loaded from the environment using
``pydantic-settings``.  These settings hold the Jira Builds and
Deployments endpoint templates and the HTTP timeout.  The update
client never reads them itself; they are resolved once when the
clients are assembled (see :mod:`jira_updates.clients.jira_api`).
"""

from __future__ import annotations

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables prefixed with ``JIRA_``.

    For example, to point the Builds client at a staging gateway set
    ``JIRA_BUILDS_API_ENDPOINT=https://staging.example.com/builds/%s/bulk``.
    Each endpoint must contain exactly one ``%s`` placeholder for the
    Jira Cloud id.
    """

    builds_api_endpoint: str = Field(
        "https://api.atlassian.com/jira/builds/0.1/cloud/%s/bulk",
        description="Builds API URL template; %s is replaced by the cloud id.",
    )
    deployments_api_endpoint: str = Field(
        "https://api.atlassian.com/jira/deployments/0.1/cloud/%s/bulk",
        description="Deployments API URL template; %s is replaced by the cloud id.",
    )
    http_timeout: float = Field(10.0, gt=0, description="Hard timeout for HTTP requests in seconds.")

    model_config = SettingsConfigDict(env_prefix="JIRA_", env_file=None, case_sensitive=False)


@lru_cache()
def get_settings() -> Settings:
    """Return a cached instance of the settings.

    The returned object is shared across threads and must not be mutated.
    """
    return Settings()
