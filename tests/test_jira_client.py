"""Tests for the Jira search client."""

import logging
from unittest import mock

import requests

from ticket_tracker.jira_client import JiraClient, build_search_uri


def fake_response(status=200, content=b'{"issues": []}'):
    response = mock.Mock(spec=requests.Response)
    response.status_code = status
    response.ok = status < 400
    response.content = content
    response.text = content.decode()
    return response


class TestBuildSearchUri:
    def test_reporter_query(self):
        assert build_search_uri("reporter", "klapante", 20) == (
            "/search?jql=reporter=klapante+order+by+created&startAt=0&maxResults=20"
        )

    def test_assignee_query(self):
        assert build_search_uri("assignee", "bob", 5).startswith("/search?jql=assignee=bob+")


class TestJiraClient:
    def test_session_uses_basic_auth(self, credentials):
        client = JiraClient(credentials)
        assert client.session.auth == ("bot", "secret")
        client.close()

    def test_search_returns_body(self, credentials):
        with JiraClient(credentials, timeout=3) as client:
            with mock.patch.object(client.session, "get", return_value=fake_response()) as get:
                assert client.search("reporter", "bob", 20) == b'{"issues": []}'
        get.assert_called_once_with(
            "https://jira.example.com/rest/api/2/search?jql=reporter=bob+order+by+created&startAt=0&maxResults=20",
            timeout=3,
        )

    def test_network_error_yields_empty_body(self, credentials, caplog):
        with JiraClient(credentials) as client:
            error = requests.exceptions.ConnectionError("connection refused")
            with mock.patch.object(client.session, "get", side_effect=error):
                with caplog.at_level(logging.WARNING, logger="ticket_tracker.jira_client"):
                    assert client.search("reporter", "bob", 20) == b""
        assert "connection refused" in caplog.text

    def test_timeout_yields_empty_body(self, credentials):
        with JiraClient(credentials) as client:
            with mock.patch.object(client.session, "get", side_effect=requests.exceptions.Timeout()):
                assert client.search("reporter", "bob", 20) == b""

    def test_error_status_yields_empty_body(self, credentials, caplog):
        with JiraClient(credentials) as client:
            with mock.patch.object(client.session, "get", return_value=fake_response(401, b"Unauthorized")):
                with caplog.at_level(logging.WARNING, logger="ticket_tracker.jira_client"):
                    assert client.search("reporter", "bob", 20) == b""
        assert "401" in caplog.text

    def test_no_retry(self, credentials):
        with JiraClient(credentials) as client:
            with mock.patch.object(client.session, "get", side_effect=requests.exceptions.ConnectionError()) as get:
                client.search("reporter", "bob", 20)
        assert get.call_count == 1
