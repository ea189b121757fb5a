"""Client for the Jira REST endpoints under '/project'.

Usage:
    client = ProjectClient(transport)
    client.get_project(CallOptions("PROJ", expand=["lead", "description"]))

The transport is passed in at construction, so any JiraTransport works:
RequestsTransport against a live instance or a MagicMock in tests.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from jira_project_interface.request import CallOptions, HttpMethod, RequestDescriptor
from jira_project_interface.transport import Callback, JiraTransport

logger = logging.getLogger(__name__)

__all__ = ["ProjectClient"]


def _join(values: Any) -> str | None:
    #None for an absent or empty list so the querystring key is left out entirely
    if not values:
        return None
    return ",".join(values)


class ProjectClient:
    """
    Args:
        transport: Resolves URLs and performs the HTTP calls
    """

    _RESOURCE = "/project"

    def __init__(self, transport: JiraTransport) -> None:
        self._transport = transport

    @property
    def transport(self) -> JiraTransport:
        return self._transport

    # ------------------------------------------------------------------
    # Request options
    # ------------------------------------------------------------------

    def build_request_options(
        self,
        opts: CallOptions,
        path: str,
        method: HttpMethod | str,
        body: Mapping[str, Any] | None = None,
        querystring: Mapping[str, str] | None = None,
    ) -> RequestDescriptor:
        """
        Args:
            opts:        Identifies the project, plus optional fields and expand lists
            path:        Appended verbatim after '/project/{projectIdOrKey}' (e.g. '/versions')
            method:      The HTTP method
            body:        The request body, if any
            querystring: Extra querystring values. opts.fields and opts.expand are added to a copy

        Notes on usage:
            Neither body nor querystring is mutated. Values are not escaped here,
            the transport's URL encoding handles that.

        Returns:
            A new RequestDescriptor

        Raises:
            ValueError: If opts has no project id or key
        """
        if not opts.project_id_or_key:
            raise ValueError("CallOptions.project_id_or_key is required")

        base_path = f"{self._RESOURCE}/{opts.project_id_or_key}"
        qs: dict[str, str] = dict(querystring or {})

        fields = _join(opts.fields)
        if fields is not None:
            qs["fields"] = fields
        expand = _join(opts.expand)
        if expand is not None:
            qs["expand"] = expand

        descriptor = RequestDescriptor(
            uri=self._transport.build_url(base_path + path),
            method=HttpMethod(method),
            body=dict(body or {}),
            querystring=qs,
        )
        logger.debug("Built %s %s", descriptor.method.value, descriptor.uri)
        return descriptor

    def _collection_request(self, method: HttpMethod, body: Mapping[str, Any] | None = None) -> RequestDescriptor:
        return RequestDescriptor(
            uri=self._transport.build_url(self._RESOURCE),
            method=method,
            body=dict(body or {}),
        )

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def get_all_projects(self, opts: CallOptions | None = None, callback: Callback | None = None) -> Any:
        """Return every project visible to the current user, or to anonymous access if nobody is logged in.

        opts is ignored.
        """
        return self._transport.make_request(self._collection_request(HttpMethod.GET), callback)

    def get_project(self, opts: CallOptions, callback: Callback | None = None) -> Any:
        """Return the full representation of one project.

        All keys associated with the project are only included with expand=["projectKeys"].
        """
        return self._transport.make_request(self.build_request_options(opts, "", HttpMethod.GET), callback)

    def create_project(self, project: Mapping[str, Any], callback: Callback | None = None) -> Any:
        """Create a project from a Jira project payload (key, name, projectTypeKey, lead...)."""
        return self._transport.make_request(self._collection_request(HttpMethod.POST, project), callback)

    def update_project(self, opts: CallOptions, project: Mapping[str, Any], callback: Callback | None = None) -> Any:
        """Update a project. Only the properties present in the payload are changed."""
        descriptor = self.build_request_options(opts, "", HttpMethod.PUT, body=project)
        return self._transport.make_request(descriptor, callback)

    def delete_project(self, opts: CallOptions, callback: Callback | None = None) -> Any:
        return self._transport.make_request(self.build_request_options(opts, "", HttpMethod.DELETE), callback)

    def get_project_versions(self, opts: CallOptions, callback: Callback | None = None) -> Any:
        return self._transport.make_request(self.build_request_options(opts, "/versions", HttpMethod.GET), callback)

    def get_project_components(self, opts: CallOptions, callback: Callback | None = None) -> Any:
        return self._transport.make_request(self.build_request_options(opts, "/components", HttpMethod.GET), callback)

    def get_project_statuses(self, opts: CallOptions, callback: Callback | None = None) -> Any:
        """Return the valid statuses for the project, grouped by issue type."""
        return self._transport.make_request(self.build_request_options(opts, "/statuses", HttpMethod.GET), callback)

    def get_project_roles(self, opts: CallOptions, callback: Callback | None = None) -> Any:
        """Return a mapping of role name to role URL for the project."""
        return self._transport.make_request(self.build_request_options(opts, "/role", HttpMethod.GET), callback)

    def get_project_role(self, opts: CallOptions, role_id: str | int, callback: Callback | None = None) -> Any:
        """Return one project role with its actors."""
        descriptor = self.build_request_options(opts, f"/role/{role_id}", HttpMethod.GET)
        return self._transport.make_request(descriptor, callback)

    def get_project_properties(self, opts: CallOptions, callback: Callback | None = None) -> Any:
        """Return the keys of every entity property set on the project."""
        return self._transport.make_request(self.build_request_options(opts, "/properties", HttpMethod.GET), callback)
