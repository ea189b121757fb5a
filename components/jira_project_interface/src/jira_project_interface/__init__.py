"""Contracts shared by the Jira project client and its transports."""

from jira_project_interface.request import CallOptions, HttpMethod, RequestDescriptor
from jira_project_interface.transport import Callback, JiraTransport, ResourceNotFoundError

__all__ = [
    "Callback",
    "CallOptions",
    "HttpMethod",
    "JiraTransport",
    "RequestDescriptor",
    "ResourceNotFoundError",
]
