"""
Shared fixtures: a JiraApi wired to an ``httpx.MockTransport`` so no
test touches the network.
"""
from __future__ import annotations

from typing import Callable, List

import httpx
import pytest

from jira_updates.clients.jira_api import JiraApi

ENDPOINT = "https://api.example.com/sites/%s/update"
SITE_URL = "https://example.atlassian.net"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: List[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            request.read()
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


@pytest.fixture
def make_api():
    """Build a (JiraApi, transport) pair around a request handler."""
    clients: List[httpx.Client] = []

    def _make(handler, endpoint: str = ENDPOINT):
        transport = RecordingTransport(handler)
        client = httpx.Client(transport=transport)
        clients.append(client)
        return JiraApi(client, endpoint), transport

    yield _make
    for c in clients:
        c.close()
