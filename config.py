"""Configuration: paths, shared constants, and defaults."""

from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# ── Paths ────────────────────────────────────────────────────────────────
ROOT_DIR = Path(__file__).resolve().parent
DATA_DIR = ROOT_DIR / "data"
SESSION_FILE = DATA_DIR / "session.json"
DEFAULT_DATABASE_URL = f"sqlite:///{DATA_DIR / 'funlabs.db'}"

# ── Backend address ──────────────────────────────────────────────────────
DEFAULT_BACKEND_HOST = "0.0.0.0"
DEFAULT_BACKEND_PORT = 5000
API_PREFIX = "/api"
APP_VERSION = "1.0.0"

# ── Cloud workspace (forwarded ports get <name>-<port>.<domain>) ─────────
DEFAULT_WORKSPACE_DOMAIN = "app.github.dev"

# ── CORS defaults ────────────────────────────────────────────────────────
LOCAL_DEV_ORIGINS = (
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:5173",
)

CORS_METHODS = ("GET", "POST", "PUT", "DELETE", "OPTIONS")
CORS_HEADERS = ("Content-Type", "Authorization")


def ensure_dirs():
    """Create the local data directory if it doesn't exist."""
    DATA_DIR.mkdir(parents=True, exist_ok=True)
