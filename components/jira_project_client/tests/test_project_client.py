"""Unit tests for ProjectClient.

The transport is a MagicMock, so no HTTP calls are made. build_url mimics a
real instance so the resulting URIs can be checked.
"""

#Run with "python -m pytest components/jira_project_client/tests -v"

from unittest.mock import MagicMock

import pytest

from jira_project_client.project_client import ProjectClient
from jira_project_interface.request import CallOptions, HttpMethod, RequestDescriptor
from jira_project_interface.transport import JiraTransport

BASE = "https://test.atlassian.net/rest/api/2"


#Fixture for mock tests
@pytest.fixture
def transport():
    """Returns a mocked transport that resolves paths and echoes the descriptor back."""
    mock_transport = MagicMock(spec=JiraTransport)
    mock_transport.build_url.side_effect = lambda path: f"{BASE}{path}"
    mock_transport.make_request.side_effect = lambda descriptor, callback=None: descriptor
    return mock_transport

@pytest.fixture
def project_client(transport):
    return ProjectClient(transport)

#--------------------------- tests for build_request_options --------------------------

@pytest.mark.parametrize("fields", [["summary"], ["summary", "status"], ["a", "b", "c", "d"]])
def test_fields_are_comma_joined_without_trailing_comma(project_client, fields):
    descriptor = project_client.build_request_options(CallOptions("X", fields=fields), "", HttpMethod.GET)

    assert descriptor.querystring["fields"] == ",".join(fields)
    assert not descriptor.querystring["fields"].endswith(",")


@pytest.mark.parametrize("fields", [None, []])
def test_absent_or_empty_fields_leave_key_unset(project_client, fields):
    descriptor = project_client.build_request_options(CallOptions("X", fields=fields, expand=fields), "", "GET")

    # Assert: the keys must be missing, not set to an empty string
    assert "fields" not in descriptor.querystring
    assert "expand" not in descriptor.querystring


def test_sub_path_is_appended_after_project(project_client):
    descriptor = project_client.build_request_options(CallOptions("ABC"), "/versions", HttpMethod.GET)

    assert descriptor.uri.endswith("/project/ABC/versions")


def test_full_scenario(project_client):
    opts = CallOptions("TEST", fields=["summary", "status"], expand=["names"])

    descriptor = project_client.build_request_options(opts, "", HttpMethod.GET)

    assert descriptor.uri == f"{BASE}/project/TEST"
    assert descriptor.uri.endswith("/project/TEST")
    assert dict(descriptor.querystring) == {"fields": "summary,status", "expand": "names"}
    assert descriptor.method == HttpMethod.GET
    assert descriptor.method == "GET"
    assert dict(descriptor.body) == {}
    assert descriptor.follow_redirects is True
    assert descriptor.expect_json is True


def test_build_is_idempotent(project_client):
    opts = CallOptions("TEST", fields=["summary"], expand=["names"])

    first = project_client.build_request_options(opts, "/role", HttpMethod.GET, querystring={"startAt": "0"})
    second = project_client.build_request_options(opts, "/role", HttpMethod.GET, querystring={"startAt": "0"})

    assert first == second
    assert first is not second


def test_caller_querystring_is_merged_and_not_mutated(project_client):
    qs = {"startAt": "10"}

    descriptor = project_client.build_request_options(CallOptions("X", expand=["lead"]), "", HttpMethod.GET, querystring=qs)

    assert dict(descriptor.querystring) == {"startAt": "10", "expand": "lead"}
    assert qs == {"startAt": "10"}


def test_values_are_passed_through_unescaped(project_client):
    descriptor = project_client.build_request_options(CallOptions("X", fields=["a b", "c&d"]), "", HttpMethod.GET)

    assert descriptor.querystring["fields"] == "a b,c&d"


def test_descriptor_cannot_be_modified(project_client):
    descriptor = project_client.build_request_options(CallOptions("X", fields=["summary"]), "", HttpMethod.GET)

    with pytest.raises(TypeError):
        descriptor.querystring["fields"] = "other"
    with pytest.raises(AttributeError):
        descriptor.uri = "https://elsewhere"


def test_body_is_copied(project_client):
    body = {"name": "Renamed"}

    descriptor = project_client.build_request_options(CallOptions("X"), "", HttpMethod.PUT, body=body)
    body["name"] = "Changed after"

    assert dict(descriptor.body) == {"name": "Renamed"}


@pytest.mark.parametrize("project_id_or_key", ["", None])
def test_missing_project_id_raises_value_error(project_client, transport, project_id_or_key):
    with pytest.raises(ValueError):
        project_client.build_request_options(CallOptions(project_id_or_key), "", HttpMethod.GET)

    transport.build_url.assert_not_called()


def test_unknown_method_raises_value_error(project_client):
    with pytest.raises(ValueError):
        project_client.build_request_options(CallOptions("X"), "", "PATCHY")

#--------------------------- tests for the operations --------------------------

def test_get_all_projects_targets_collection(project_client, transport):
    # opts is ignored entirely, even when it carries fields
    descriptor = project_client.get_all_projects(CallOptions("IGNORED", fields=["summary"]))

    assert descriptor.uri == f"{BASE}/project"
    assert descriptor.method == HttpMethod.GET
    assert dict(descriptor.querystring) == {}
    assert dict(descriptor.body) == {}
    transport.make_request.assert_called_once_with(descriptor, None)


def test_get_all_projects_without_opts(project_client):
    descriptor = project_client.get_all_projects()

    assert descriptor.uri == f"{BASE}/project"


def test_get_project_delegates_built_descriptor(project_client, transport):
    opts = CallOptions("PROJ", expand=["projectKeys"])

    descriptor = project_client.get_project(opts)

    assert descriptor == project_client.build_request_options(opts, "", HttpMethod.GET)
    transport.make_request.assert_called_once()


def test_callback_is_forwarded_to_transport(project_client, transport):
    callback = MagicMock()

    project_client.get_project(CallOptions("PROJ"), callback)

    _, passed_callback = transport.make_request.call_args[0]
    assert passed_callback is callback


@pytest.mark.parametrize(
    ("operation", "suffix"),
    [
        ("get_project_versions", "/versions"),
        ("get_project_components", "/components"),
        ("get_project_statuses", "/statuses"),
        ("get_project_roles", "/role"),
        ("get_project_properties", "/properties"),
    ],
)
def test_sub_resource_operations(project_client, operation, suffix):
    descriptor = getattr(project_client, operation)(CallOptions("PROJ"))

    assert descriptor.uri == f"{BASE}/project/PROJ{suffix}"
    assert descriptor.method == HttpMethod.GET


def test_get_project_role(project_client):
    descriptor = project_client.get_project_role(CallOptions("PROJ"), 10002)

    assert descriptor.uri == f"{BASE}/project/PROJ/role/10002"


def test_create_project_posts_to_collection(project_client):
    payload = {"key": "NEW", "name": "New project", "projectTypeKey": "software", "lead": "admin"}

    descriptor = project_client.create_project(payload)

    assert descriptor.uri == f"{BASE}/project"
    assert descriptor.method == HttpMethod.POST
    assert dict(descriptor.body) == payload


def test_update_project_puts_payload(project_client):
    descriptor = project_client.update_project(CallOptions("PROJ"), {"name": "Renamed"})

    assert descriptor.uri == f"{BASE}/project/PROJ"
    assert descriptor.method == HttpMethod.PUT
    assert dict(descriptor.body) == {"name": "Renamed"}


def test_delete_project(project_client):
    descriptor = project_client.delete_project(CallOptions("PROJ"))

    assert descriptor.method == HttpMethod.DELETE
    assert descriptor.uri == f"{BASE}/project/PROJ"


def test_transport_errors_are_not_caught(project_client, transport):
    transport.make_request.side_effect = RuntimeError("boom")

    with pytest.raises(RuntimeError):
        project_client.get_project(CallOptions("PROJ"))

#--------------------------- tests for RequestDescriptor --------------------------

def test_descriptor_defaults():
    descriptor = RequestDescriptor(uri="https://x/rest/api/2/project", method="GET")

    assert descriptor.method is HttpMethod.GET
    assert dict(descriptor.body) == {}
    assert dict(descriptor.querystring) == {}
    assert descriptor.follow_redirects is True
    assert descriptor.expect_json is True
