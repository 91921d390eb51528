"""Utility helpers: env parsing, timestamps, JSON file I/O."""

import json
from datetime import datetime, timezone
from pathlib import Path


def split_csv(raw: str | None) -> list[str]:
    """Split a comma-separated value into stripped, non-empty, unique items."""
    if not raw:
        return []
    items: list[str] = []
    for chunk in raw.split(","):
        item = chunk.strip()
        if item and item not in items:
            items.append(item)
    return items


def split_patterns(raw: str | None) -> list[str]:
    """Split a list of regexes: a JSON array, or whitespace-separated.

    Commas are legal inside a regex (``{1,8}``), so patterns are never split on
    them. Whitespace cannot appear in an origin, so it is a safe separator.
    """
    if not raw or not raw.strip():
        return []
    raw = raw.strip()
    chunks = None
    if raw.startswith("["):
        try:
            chunks = json.loads(raw)
        except json.JSONDecodeError:
            # a bare regex that starts with a character class
            chunks = None
        if chunks is not None and (
            not isinstance(chunks, list) or not all(isinstance(c, str) for c in chunks)
        ):
            raise ValueError("Pattern list must be a JSON array of strings")
    if chunks is None:
        chunks = raw.split()
    items: list[str] = []
    for chunk in chunks:
        item = chunk.strip()
        if item and item not in items:
            items.append(item)
    return items


def parse_bool(raw: str | None, default: bool) -> bool:
    """Interpret an env-style flag ("1", "true", "yes", ...)."""
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() not in {"0", "false", "no", "off"}


def iso_now() -> str:
    """Current UTC time as an ISO-8601 string with a trailing Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def read_json_file(path: Path):
    """Load JSON from path, or return None if the file is missing or empty."""
    if not path.exists():
        return None
    data = path.read_text(encoding="utf-8").strip()
    if not data:
        return None
    return json.loads(data)


def write_json_file(path: Path, payload) -> None:
    """Write payload as pretty JSON, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(payload, indent=2, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )
