"""Click commands, run through CliRunner."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

import cli as cli_module
from frontend import api as api_module
from frontend import auth as auth_module
from frontend.api import TransportError


@pytest.fixture
def runner():
    return CliRunner()


def test_resolve_url_localhost(runner, monkeypatch):
    monkeypatch.delenv("FUNLABS_API_BASE_URL", raising=False)
    result = runner.invoke(cli_module.cli, ["resolve-url", "--hostname", "localhost"])
    assert result.exit_code == 0
    assert "http://localhost:5000/api" in result.output
    assert "Local development" in result.output


def test_resolve_url_workspace(runner, monkeypatch):
    monkeypatch.delenv("FUNLABS_API_BASE_URL", raising=False)
    monkeypatch.setenv("WORKSPACE_DOMAIN", "app.github.dev")
    result = runner.invoke(
        cli_module.cli, ["resolve-url", "--hostname", "my-space-5173.app.github.dev"]
    )
    assert result.exit_code == 0
    assert "https://my-space-5000.app.github.dev/api" in result.output


def test_resolve_url_explicit(runner):
    result = runner.invoke(cli_module.cli, ["resolve-url", "--base-url", "https://api.example.com/v2"])
    assert "https://api.example.com/v2" in result.output


class _FakeClient:
    def __init__(self, topics=None, error=None):
        self._topics = topics or []
        self._error = error
        self.topics = self
        self.lessons = self

    def get_all(self):
        if self._error:
            raise self._error
        return self._topics

    def get_questions(self, lesson_id):
        return [{"orderIndex": 1, "type": "TRUE_FALSE", "points": 10}]


def test_topics_lists_lessons(runner, monkeypatch):
    topics = [{
        "orderIndex": 1,
        "name": "AI Fundamentals",
        "lessons": [{"id": "l1", "title": "What is AI?", "difficulty": "BEGINNER"}],
    }]
    monkeypatch.setattr(api_module, "ApiClient", lambda **kwargs: _FakeClient(topics))
    result = runner.invoke(cli_module.cli, ["topics"])
    assert result.exit_code == 0
    assert "AI Fundamentals" in result.output
    assert "What is AI?" in result.output


def test_topics_reports_api_errors(runner, monkeypatch):
    error = TransportError("Could not reach http://localhost:5000/api/topics")
    monkeypatch.setattr(api_module, "ApiClient", lambda **kwargs: _FakeClient(error=error))
    result = runner.invoke(cli_module.cli, ["topics"])
    assert result.exit_code == 1
    assert "Could not reach" in result.output


def test_questions(runner, monkeypatch):
    monkeypatch.setattr(api_module, "ApiClient", lambda **kwargs: _FakeClient())
    result = runner.invoke(cli_module.cli, ["questions", "l1"])
    assert result.exit_code == 0
    assert "TRUE_FALSE" in result.output


def test_signin_whoami_signout(runner, monkeypatch, tmp_path):
    monkeypatch.setattr(auth_module, "SESSION_FILE", tmp_path / "session.json")

    result = runner.invoke(cli_module.cli, ["signin", "--username", "demo", "--password", "demo123"])
    assert result.exit_code == 0
    assert "Signed in as demo" in result.output

    assert "demo@funlabs.ai" in runner.invoke(cli_module.cli, ["whoami"]).output
    runner.invoke(cli_module.cli, ["signout"])
    assert "Not signed in" in runner.invoke(cli_module.cli, ["whoami"]).output


def test_signin_bad_credentials(runner, monkeypatch, tmp_path):
    monkeypatch.setattr(auth_module, "SESSION_FILE", tmp_path / "session.json")
    result = runner.invoke(cli_module.cli, ["signin", "--username", "demo", "--password", "bad"])
    assert result.exit_code == 1
    assert "Invalid username or password" in result.output


def test_seed_command(runner, monkeypatch, tmp_path):
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'funlabs.db'}")
    result = runner.invoke(cli_module.cli, ["seed"])
    assert result.exit_code == 0
    assert "questions" in result.output
    assert "4" in result.output


def test_leaderboard(runner):
    result = runner.invoke(cli_module.cli, ["leaderboard", "--limit", "3"])
    assert result.exit_code == 0
    assert "Alex Chen" in result.output
    assert "Emma Wilson" not in result.output
