"""
Configuration
-------------
The client supports two credential modes:

1. When get_client(interactive = True)
    User is prompted for the three required values below at runtime if any are missing from the environment.
2. When get_client(interactive = False) - Default
        JIRA_BASE_URL     https://myorg.atlassian.net
        JIRA_USER_EMAIL   me@example.com
        JIRA_API_TOKEN    <token from https://id.atlassian.com/manage-profile/security/api-tokens>
        JIRA_API_VERSION  optional, defaults to 2
"""
from __future__ import annotations

import logging
import os
from getpass import getpass

from jira_project_client.project_client import ProjectClient
from jira_project_client.requests_transport import RequestsTransport

logger = logging.getLogger(__name__)

DEFAULT_API_VERSION = "2"


def get_client(*, interactive: bool = False) -> ProjectClient:
    """Return a ProjectClient wired to a RequestsTransport.

    Reads credentials from environment variables. If "interactive = True" and
    any variable is missing, the user will be prompted.

    Raises:
        EnvironmentError: If a required variable is missing and interactive is False
    """
    base_url = os.environ.get("JIRA_BASE_URL", "")
    user_email = os.environ.get("JIRA_USER_EMAIL", "")
    api_token = os.environ.get("JIRA_API_TOKEN", "")
    api_version = os.environ.get("JIRA_API_VERSION", "") or DEFAULT_API_VERSION

    if interactive:
        if not base_url:
            base_url = input("Jira base URL (e.g. https://myorg.atlassian.net): ").strip()
        if not user_email:
            user_email = input("Jira user email: ").strip()
        if not api_token:
            api_token = getpass("Jira API token: ")
    else:
        #collects the missing fields and raises an error alerting to the missing values
        missing = [name for name, val in [
            ("JIRA_BASE_URL", base_url),
            ("JIRA_USER_EMAIL", user_email),
            ("JIRA_API_TOKEN", api_token),
        ] if not val]
        if missing:
            raise EnvironmentError(
                f"Missing required environment variables: {', '.join(missing)}. "
                "Set them or call get_client(interactive=True)."
            )

    logger.debug("Configuring Jira client for %s (API v%s)", base_url, api_version)
    transport = RequestsTransport(base_url, user_email, api_token, api_version=api_version)
    return ProjectClient(transport)
