"""Demo catalog seeding."""

from __future__ import annotations

from backend.seed import count_rows, seed_database

EXPECTED = {"topics": 2, "lessons": 2, "questions": 4, "achievements": 2}


def _session(api):
    return api.app.state.session_factory()


def test_seed_inserts_demo_catalog(api):
    session = _session(api)
    try:
        assert seed_database(session) == EXPECTED
    finally:
        session.close()


def test_seed_is_idempotent(api):
    session = _session(api)
    try:
        seed_database(session)
        assert seed_database(session) == EXPECTED
    finally:
        session.close()


def test_seed_reset_replaces_rows(seeded_api):
    session = _session(seeded_api)
    try:
        before = seeded_api.get("/api/topics").json()[0]["id"]
        assert seed_database(session, reset=True) == EXPECTED
        assert count_rows(session) == EXPECTED
    finally:
        session.close()
    after = seeded_api.get("/api/topics").json()[0]["id"]
    assert before != after
