"""
logging_config.py
------------------

Shared logging configuration for the Jira update client.  It uses
Python's built‑in ``logging`` module and serialises every message as a
JSON string so that build servers and log shippers can parse the
records downstream.

Import ``logger`` instead of calling ``logging.info`` directly.  The
``log_http_request`` helper records outbound calls at DEBUG level
without leaking bearer tokens or other secrets.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Any, Dict

# Set up the root logger once.  Output goes to stdout with a timestamp and
# level; the message itself is a JSON string.
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger("jira_updates")

_SENSITIVE_HEADERS = {"authorization", "proxy-authorization", "cookie"}
_SENSITIVE_KEYS = ("token", "password", "secret")


def _sanitize(obj: Any) -> Any:
    """Recursively sanitise objects for logging.

    Dictionaries lose keys containing 'token', 'password' or 'secret',
    byte strings are replaced by a length marker and pydantic models are
    dumped before being cleaned.  Anything that still cannot be
    represented as JSON is logged through its ``str``.
    """
    if isinstance(obj, (bytes, bytearray)):
        return f"<binary {len(obj)} bytes>"
    if isinstance(obj, dict):
        clean: Dict[str, Any] = {}
        for k, v in obj.items():
            if any(keyword in str(k).lower() for keyword in _SENSITIVE_KEYS):
                continue
            clean[k] = _sanitize(v)
        return clean
    if isinstance(obj, (list, tuple)):
        return [_sanitize(i) for i in obj]
    if hasattr(obj, "model_dump"):
        try:
            return _sanitize(obj.model_dump(mode="json", by_alias=True))
        except Exception:
            return str(obj)
    try:
        return json.loads(json.dumps(obj))
    except (TypeError, ValueError):
        return str(obj)


def log_http_request(method: str, url: str, *, headers: Dict[str, Any] | None = None,
                     json_body: Any = None, status: int | None = None,
                     duration_ms: float | None = None, **context: Any) -> None:
    """Log an outbound HTTP request at DEBUG level.

    Authentication headers are dropped and the JSON body is passed
    through :func:`_sanitize`.  Extra keyword arguments (for example the
    Jira site URL) are added to the record as context.

    Parameters
    ----------
    method : str
        The HTTP method (GET, POST, etc.)
    url : str
        The URL being requested.
    headers : dict, optional
        Request headers.  Sensitive keys are removed.
    json_body : Any, optional
        Request payload.
    status : int, optional
        Response status code (log end only).
    duration_ms : float, optional
        Time taken in milliseconds (log end only).
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return
    data: Dict[str, Any] = {
        "event": "http_request",
        "method": method,
        "url": url,
    }
    if headers is not None:
        data["headers"] = {k: v for k, v in headers.items() if k.lower() not in _SENSITIVE_HEADERS}
    if json_body is not None:
        data["json"] = _sanitize(json_body)
    if status is not None:
        data["status"] = status
    if duration_ms is not None:
        data["duration_ms"] = round(duration_ms, 2)
    data.update(_sanitize(context))
    logger.debug(json.dumps(data))
