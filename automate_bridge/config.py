"""Configuration and shared state."""

__version__ = "0.1.0"

import os
import sys
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

_stderr_print = lambda *a, **kw: print(*a, **kw, file=sys.stderr)

DEFAULT_BASE_URL = "http://localhost:8000"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 5000


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        _stderr_print(f"Invalid {name}={raw!r}, falling back to {default}")
        return default


CONFIG = {
    # Remote automation engine
    "base_url": os.getenv("AUTOMATE_BASE_URL", DEFAULT_BASE_URL).strip().rstrip("/") or DEFAULT_BASE_URL,
    # Bridge web server
    "host": os.getenv("BRIDGE_HOST", DEFAULT_HOST).strip() or DEFAULT_HOST,
    "port": _env_int("BRIDGE_PORT", DEFAULT_PORT),
    # Log request/response bodies (failures are always logged)
    "verbose": _env_flag("AUTOMATE_VERBOSE", "true"),
}


# ── Typed config ──────────────────────────────────────


@dataclass
class BridgeConfig:
    """Typed view over CONFIG."""

    base_url: str = DEFAULT_BASE_URL
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    verbose: bool = True

    @classmethod
    def from_env(cls) -> "BridgeConfig":
        """Create BridgeConfig from environment variables."""
        return cls(
            base_url=CONFIG["base_url"],
            host=CONFIG["host"],
            port=CONFIG["port"],
            verbose=CONFIG["verbose"],
        )
