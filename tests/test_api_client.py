"""HTTP client wrapper: URL building, headers and the three failure kinds."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
import requests

from frontend.api import (
    ApiClient,
    HttpStatusError,
    ParseError,
    TransportError,
    describe_error,
)
from frontend.endpoint import EndpointConfig


def _response(status_code=200, payload=None, reason="OK"):
    resp = MagicMock()
    resp.status_code = status_code
    resp.reason = reason
    resp.json.return_value = [] if payload is None else payload
    return resp


def _client(response=None, **kwargs):
    session = MagicMock()
    session.get.return_value = response or _response()
    client = ApiClient(session=session, hostname="localhost", config=EndpointConfig(), **kwargs)
    return client, session


def test_base_url_is_resolved_once_at_construction():
    client, _ = _client()
    assert client.base_url == "http://localhost:5000/api"


def test_api_url_inserts_missing_slash():
    client, _ = _client(base_url="https://api.example.com/v2")
    assert client.api_url("topics") == "https://api.example.com/v2/topics"
    assert client.api_url("/topics") == "https://api.example.com/v2/topics"


def test_get_all_topics():
    topics = [{"id": "t1", "name": "AI Fundamentals", "lessons": []}]
    client, session = _client(_response(payload=topics))
    assert client.topics.get_all() == topics

    url = session.get.call_args.args[0]
    headers = session.get.call_args.kwargs["headers"]
    assert url == "http://localhost:5000/api/topics"
    assert headers["Content-Type"] == "application/json"
    assert "Origin" not in headers


def test_origin_header_is_sent_when_configured():
    client, session = _client(origin="http://localhost:5173")
    client.topics.get_all()
    assert session.get.call_args.kwargs["headers"]["Origin"] == "http://localhost:5173"


def test_lesson_questions_path():
    client, session = _client(_response(payload=[{"id": "q1"}]))
    assert client.lessons.get_questions("lesson-42") == [{"id": "q1"}]
    assert session.get.call_args.args[0] == "http://localhost:5000/api/lessons/lesson-42/questions"


def test_lesson_id_is_escaped_into_one_path_segment():
    client, session = _client()
    client.lessons.get_questions("a/b?c")
    assert session.get.call_args.args[0] == "http://localhost:5000/api/lessons/a%2Fb%3Fc/questions"


def test_transport_failure_keeps_cause():
    client, session = _client()
    cause = requests.ConnectionError("connection refused")
    session.get.side_effect = cause
    with pytest.raises(TransportError) as excinfo:
        client.topics.get_all()
    assert excinfo.value.__cause__ is cause


def test_http_error_status():
    client, _ = _client(_response(status_code=500, reason="Internal Server Error"))
    with pytest.raises(HttpStatusError) as excinfo:
        client.topics.get_all()
    assert excinfo.value.status_code == 500
    assert str(excinfo.value) == "HTTP error! status: 500 - Internal Server Error"


def test_non_json_body_is_a_parse_error():
    resp = _response()
    resp.json.side_effect = ValueError("Expecting value")
    client, _ = _client(resp)
    with pytest.raises(ParseError):
        client.topics.get_all()


def test_json_object_instead_of_array_is_a_parse_error():
    client, _ = _client(_response(payload={"error": "nope"}))
    with pytest.raises(ParseError, match="JSON array"):
        client.topics.get_all()


def test_parse_and_transport_errors_are_distinct():
    assert not issubclass(ParseError, TransportError)
    assert not issubclass(TransportError, ParseError)


def test_describe_error():
    assert describe_error(TransportError("down")) == "down"
    assert describe_error("not an exception") == "An unknown error occurred"
