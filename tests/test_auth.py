"""Mock sign-in over the demo accounts."""

from __future__ import annotations

import json

import pytest

from frontend.auth import AuthSession


@pytest.fixture
def store(tmp_path):
    return tmp_path / "session.json"


def test_sign_in_with_demo_account(store):
    auth = AuthSession(store)
    assert auth.sign_in("demo", "demo123")
    assert auth.is_signed_in
    assert auth.user["email"] == "demo@funlabs.ai"
    assert "password" not in auth.user
    assert "password" not in json.loads(store.read_text(encoding="utf-8"))


def test_wrong_password_is_refused(store):
    auth = AuthSession(store)
    assert not auth.sign_in("demo", "nope")
    assert not auth.is_signed_in
    assert not store.exists()


def test_session_is_restored_from_store(store):
    AuthSession(store).sign_in("student", "student123")
    restored = AuthSession(store)
    assert restored.is_signed_in
    assert restored.user["username"] == "student"


def test_sign_out_clears_store(store):
    auth = AuthSession(store)
    auth.sign_in("learner", "learner123")
    auth.sign_out()
    assert not auth.is_signed_in
    assert not store.exists()
    assert not AuthSession(store).is_signed_in


def test_update_user(store):
    auth = AuthSession(store)
    assert auth.update_user(gems=1) is None

    auth.sign_in("demo", "demo123")
    updated = auth.update_user(gems=300, hearts=4)
    assert updated["gems"] == 300
    assert AuthSession(store).user["hearts"] == 4

    with pytest.raises(ValueError):
        auth.update_user(password="x")
