"""
Transport backed by requests.

Authentication
--------------
Jira Cloud accepts basic auth made of the account email and an API token
generated at https://id.atlassian.com/manage-profile/security/api-tokens

Dependencies:
    uv add requests
"""
#to avoid having to consider forward declarations, the below line must be first line in the file
from __future__ import annotations

import logging
from typing import Any

import requests
from requests.auth import HTTPBasicAuth

from jira_project_interface.request import RequestDescriptor
from jira_project_interface.transport import Callback, JiraTransport
from jira_project_interface.transport import ResourceNotFoundError as BaseResourceNotFoundError

logger = logging.getLogger(__name__)


class JiraError(Exception):
    """Raised when the Jira API returns an unexpected response."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code

class ResourceNotFoundError(BaseResourceNotFoundError, JiraError):
    """Raised when a requested Jira resource does not exist."""

    def __init__(self, message: str) -> None:
        JiraError.__init__(self, message, status_code=404)


class RequestsTransport(JiraTransport):
    """
    Args:
        base_url:    Jira instance root URL (e.g. 'https://myorg.atlassian.net')
        user_email:  Email associated with the Jira account
        api_token:   API token generated from Atlassian account settings
        api_version: REST API version used in the URL context
        timeout:     Seconds to wait for the server before giving up
    """

    def __init__(
        self,
        base_url: str,
        user_email: str,
        api_token: str,
        *,
        api_version: str = "2",
        timeout: float = 30,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._api_prefix = f"/rest/api/{api_version}"
        self._timeout = timeout
        self._session = requests.Session()
        self._session.auth = HTTPBasicAuth(user_email, api_token)
        self._session.headers.update({"Accept": "application/json", "Content-Type": "application/json"})

    @property
    def base_url(self) -> str:
        return self._base_url

    def build_url(self, path: str) -> str:
        return f"{self._base_url}{self._api_prefix}{path}"

    def make_request(self, descriptor: RequestDescriptor, callback: Callback | None = None) -> Any:
        """Send the descriptor through the shared session.

        Without a callback the decoded body is returned and errors are raised.
        With one, it is called as callback(error, response, body) and its result is returned.
        """
        response: requests.Response | None = None
        try:
            response = self._send(descriptor)
            self._raise_for_status(response)
            body = self._decode(response, descriptor.expect_json)
        except JiraError as exc:
            if callback is None:
                raise
            return callback(exc, response, None)

        if callback is None:
            return body
        return callback(None, response, body)

    # ------------------------------------------------------------------
    # Internal HTTP helpers
    # ------------------------------------------------------------------

    def _send(self, descriptor: RequestDescriptor) -> requests.Response:
        logger.debug("%s %s params=%s", descriptor.method.value, descriptor.uri, dict(descriptor.querystring))
        try:
            return self._session.request(
                descriptor.method.value,
                descriptor.uri,
                params=dict(descriptor.querystring) or None,
                #GET and DELETE carry no body, so an empty mapping is not sent at all
                json=dict(descriptor.body) or None,
                allow_redirects=descriptor.follow_redirects,
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            logger.warning("Request to %s failed: %s", descriptor.uri, exc)
            raise JiraError(f"Request to {descriptor.uri} failed: {exc}") from exc

    @staticmethod
    def _raise_for_status(response: requests.Response) -> None:
        if response.status_code == 404:
            logger.warning("Resource not found: %s", response.url)
            raise ResourceNotFoundError(f"Resource not found: {response.url}")
        if not response.ok:
            try:
                detail = response.json()
            except ValueError:
                detail = response.text
            #Jira reports failures as {"errorMessages": [...], "errors": {...}}
            if isinstance(detail, dict) and detail.get("errorMessages"):
                detail = "; ".join(detail["errorMessages"])
            logger.warning("Jira API error %s from %s", response.status_code, response.url)
            raise JiraError(f"Jira API error {response.status_code}: {detail}", status_code=response.status_code)

    @staticmethod
    def _decode(response: requests.Response, expect_json: bool) -> Any:
        # Jira PUT and DELETE return 204 No Content on success
        if response.status_code == 204 or not response.content:
            return None
        if not expect_json:
            return response.text
        try:
            return response.json()
        except ValueError as exc:
            raise JiraError(
                f"Expected JSON from {response.url} but got: {response.text[:200]}",
                status_code=response.status_code,
            ) from exc
