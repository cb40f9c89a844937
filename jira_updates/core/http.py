"""
core/http.py
-------------

Provider for the shared synchronous ``httpx`` client.  ``httpx.Client``
keeps a connection pool and is safe to share between threads, so one
instance should be created per process and closed by whoever owns it.
"""

from __future__ import annotations

from typing import Optional

import httpx

from jira_updates.core.config import Settings, get_settings


def create_http_client(settings: Optional[Settings] = None) -> httpx.Client:
    """Create an ``httpx.Client`` honouring the configured timeout."""
    settings = settings or get_settings()
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout),
        verify=True,
    )
