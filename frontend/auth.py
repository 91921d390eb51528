"""Mock sign-in against built-in demo accounts.

There is no real authentication: credentials are checked against the
in-memory ``DEMO_ACCOUNTS`` and the signed-in user is kept in a small JSON file
so it survives between CLI invocations.
"""

from __future__ import annotations

import logging
from pathlib import Path

from config import SESSION_FILE
from utils import read_json_file, write_json_file

logger = logging.getLogger(__name__)

DEMO_ACCOUNTS = [
    {
        "id": "1",
        "username": "demo",
        "password": "demo123",
        "email": "demo@funlabs.ai",
        "gems": 250,
        "hearts": 5,
        "level": 3,
        "xp": 1250,
        "avatar": "👨‍💻",
    },
    {
        "id": "2",
        "username": "student",
        "password": "student123",
        "email": "student@funlabs.ai",
        "gems": 180,
        "hearts": 4,
        "level": 2,
        "xp": 890,
        "avatar": "👩‍🎓",
    },
    {
        "id": "3",
        "username": "learner",
        "password": "learner123",
        "email": "learner@funlabs.ai",
        "gems": 320,
        "hearts": 5,
        "level": 4,
        "xp": 1680,
        "avatar": "🧠",
    },
]

USER_FIELDS = ("id", "username", "email", "gems", "hearts", "level", "xp", "avatar")


class AuthSession:
    """The current demo user, persisted to ``store_path``."""

    def __init__(self, store_path: Path | None = None):
        self.store_path = Path(store_path or SESSION_FILE)
        self._user: dict | None = read_json_file(self.store_path)

    @property
    def user(self) -> dict | None:
        return dict(self._user) if self._user else None

    @property
    def is_signed_in(self) -> bool:
        return self._user is not None

    def sign_in(self, username: str, password: str) -> bool:
        account = next(
            (a for a in DEMO_ACCOUNTS
             if a["username"] == username and a["password"] == password),
            None,
        )
        if account is None:
            logger.info("Invalid credentials for %r", username)
            return False

        self._user = {field: account[field] for field in USER_FIELDS}
        write_json_file(self.store_path, self._user)
        logger.info("User %s signed in", username)
        return True

    def sign_out(self) -> None:
        self._user = None
        if self.store_path.exists():
            self.store_path.unlink()

    def update_user(self, **updates) -> dict | None:
        """Merge updates into the signed-in user. No-op when signed out."""
        if self._user is None:
            return None
        unknown = set(updates) - set(USER_FIELDS)
        if unknown:
            raise ValueError(f"Unknown user fields: {', '.join(sorted(unknown))}")
        self._user = {**self._user, **updates}
        write_json_file(self.store_path, self._user)
        return self.user
