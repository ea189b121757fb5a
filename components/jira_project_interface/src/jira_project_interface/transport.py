"""Transport contract - URL resolution and request dispatch."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from jira_project_interface.request import RequestDescriptor

__all__ = ["Callback", "JiraTransport", "ResourceNotFoundError"]

#callback(error, response, body); error is None on success
Callback = Callable[[Exception | None, Any, Any], Any]


class JiraTransport(ABC):
    """Resolves paths against a Jira instance and performs HTTP calls."""

    @abstractmethod
    def build_url(self, path: str) -> str:
        """Resolve a path."""
        """Args:
            path: An API path such as '/project/PROJ'

        Notes on usage: The path is relative to the REST API root, so the host, port and
        API context (e.g. '/rest/api/2') are added by the implementation.

        Returns:
            The absolute URL
        """
        raise NotImplementedError

    @abstractmethod
    def make_request(self, descriptor: RequestDescriptor, callback: Callback | None = None) -> Any:
        """Perform a request."""
        """Args:
            descriptor: The request to perform
            callback:   Optional, called exactly once as callback(error, response, body)

        Notes on usage:
            With a callback, failures are delivered through its error argument and the
            callback's return value is returned.
            Without a callback, the decoded body is returned and failures are raised.

        Raises:
            ResourceNotFoundError: If the resource does not exist and no callback was given
        """
        raise NotImplementedError

class ResourceNotFoundError(Exception):
    """Base exception raised when a transport reports that a resource does not exist."""
