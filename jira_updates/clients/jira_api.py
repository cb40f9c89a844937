"""
clients/jira_api.py
--------------------

Common HTTP client used to submit updates to the Jira Builds and
Deployments APIs.

:class:`JiraApi` serialises a request payload, posts it to an endpoint
template bound to a Jira Cloud id and decodes the answer into a caller
supplied type.  Every failure is turned into a failed
:class:`~jira_updates.schemas.result.UpdateResult`; ``post_update``
never raises.
"""

from __future__ import annotations

import json
import time
from typing import Any, Optional, Type, TypeVar

import httpx

from jira_updates.core.codec import JsonCodec, PayloadEncodingError, PayloadNotSerializableError
from jira_updates.core.config import Settings, get_settings
from jira_updates.logging_config import log_http_request, logger
from jira_updates.schemas.result import ApiUpdateFailedError, UpdateErrorKind, UpdateResult

T = TypeVar("T")

JSON_MEDIA_TYPE = "application/json; charset=utf-8"


class JiraApi:
    """Submits updates to a Jira bulk API and returns an :class:`UpdateResult`.

    The instance holds no per-call state: the endpoint template is fixed
    at construction and the ``httpx`` client and codec are safe to share
    between threads, so concurrent calls need no locking.
    """

    def __init__(self, http_client: httpx.Client, api_endpoint: str,
                 codec: Optional[JsonCodec] = None) -> None:
        if http_client is None:
            raise ValueError("http_client is required")
        self._http_client = http_client
        self._api_endpoint = _validate_endpoint(api_endpoint)
        self._codec = codec or JsonCodec()

    @property
    def api_endpoint(self) -> str:
        return self._api_endpoint

    def build_url(self, cloud_id: str) -> str:
        return self._api_endpoint % cloud_id

    def post_update(
        self,
        cloud_id: str,
        access_token: str,
        jira_site_url: str,
        jira_request: Any,
        response_type: Type[T],
    ) -> UpdateResult[T]:
        """Submit an update and return the decoded response.

        :param cloud_id: Jira Cloud id substituted into the endpoint template
        :param access_token: access token generated from the Atlassian API
        :param jira_site_url: Jira site URL, recorded in log entries only
        :param jira_request: assembled payload (pydantic model, dict, ...)
        :param response_type: type the response body is decoded into, e.g.
            :class:`~jira_updates.schemas.builds.BuildApiResponse`
        :return: a successful result carrying the response, or a failed one
            carrying an error message
        """
        try:
            payload = self._codec.encode(jira_request)
            return UpdateResult.success(
                self._submit(cloud_id, access_token, jira_site_url, jira_request, payload, response_type)
            )
        except PayloadNotSerializableError as e:
            return self._handle_error(f"Invalid JSON payload: {e}", UpdateErrorKind.PAYLOAD_NOT_SERIALIZABLE)
        except PayloadEncodingError as e:
            return self._handle_error(
                f"Unable to create the request payload: {e}", UpdateErrorKind.PAYLOAD_ENCODING_ERROR
            )
        except httpx.RequestError as e:
            return self._handle_error(
                f"Server exception when submitting update to Jira: {e}", UpdateErrorKind.TRANSPORT_ERROR
            )
        except ApiUpdateFailedError as e:
            return self._handle_error(e.message, e.kind)
        except Exception as e:
            return self._handle_error(
                f"Unexpected error when submitting update to Jira: {e}", UpdateErrorKind.UNEXPECTED_ERROR,
                exc_info=True,
            )

    def _submit(self, cloud_id: str, access_token: str, jira_site_url: str,
                jira_request: Any, payload: bytes, response_type: Type[T]) -> T:
        url = self.build_url(cloud_id)
        headers = {
            "Authorization": f"Bearer {access_token}",
            "Content-Type": JSON_MEDIA_TYPE,
        }
        log_http_request("POST", url, headers=headers, json_body=jira_request, jira_site_url=jira_site_url)
        start_time = time.time()
        # the stream context releases the connection on every exit path
        with self._http_client.stream("POST", url, content=payload, headers=headers) as response:
            body = response.read()
            log_http_request("POST", url, status=response.status_code,
                             duration_ms=(time.time() - start_time) * 1000,
                             jira_site_url=jira_site_url)
            self._check_for_error_response(response, body, jira_site_url)
        return self._handle_response_body(body, response_type)

    def _check_for_error_response(self, response: httpx.Response, body: bytes, jira_site_url: str) -> None:
        if response.is_success:
            return
        message = f"Error response code {response.status_code} when submitting update to Jira"
        if body:
            logger.error(json.dumps({
                "event": "jira_update_error_response",
                "status": response.status_code,
                "url": str(response.request.url),
                "jira_site_url": jira_site_url,
                "detail": "Error response body when submitting update to Jira",
                "body": body.decode("utf-8", errors="replace"),
            }))
        raise ApiUpdateFailedError(message, UpdateErrorKind.REJECTED_STATUS)

    def _handle_response_body(self, body: bytes, response_type: Type[T]) -> T:
        if not body:
            raise ApiUpdateFailedError(
                "Empty response body when submitting update to Jira",
                UpdateErrorKind.EMPTY_RESPONSE_BODY,
            )
        return self._codec.decode(body, response_type)

    @staticmethod
    def _handle_error(message: str, kind: UpdateErrorKind, exc_info: bool = False) -> UpdateResult[Any]:
        logger.warning(json.dumps({
            "event": "jira_update_failed",
            "kind": kind.value,
            "detail": message,
        }), exc_info=exc_info)
        return UpdateResult.failure(message, kind)


def _validate_endpoint(api_endpoint: str) -> str:
    """Check that the template takes exactly one string substitution."""
    if not isinstance(api_endpoint, str) or not api_endpoint:
        raise ValueError("api_endpoint must be a non-empty string")
    try:
        api_endpoint % "cloud-id"
    except (TypeError, ValueError) as exc:
        raise ValueError(
            f"api_endpoint must contain exactly one %s placeholder: {api_endpoint!r}"
        ) from exc
    return api_endpoint


def create_builds_api(http_client: httpx.Client, settings: Optional[Settings] = None) -> JiraApi:
    """Return a :class:`JiraApi` bound to the Builds API endpoint."""
    settings = settings or get_settings()
    return JiraApi(http_client, settings.builds_api_endpoint)


def create_deployments_api(http_client: httpx.Client, settings: Optional[Settings] = None) -> JiraApi:
    """Return a :class:`JiraApi` bound to the Deployments API endpoint."""
    settings = settings or get_settings()
    return JiraApi(http_client, settings.deployments_api_endpoint)
