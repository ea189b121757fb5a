"""Jira '/project' endpoints client."""

from jira_project_client.factory import get_client
from jira_project_client.project_client import ProjectClient
from jira_project_client.requests_transport import JiraError, RequestsTransport, ResourceNotFoundError

__all__ = ["JiraError", "ProjectClient", "RequestsTransport", "ResourceNotFoundError", "get_client"]
