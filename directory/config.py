"""Runtime configuration for the advocate directory.

All settings come from environment variables and have defaults, so the app
runs without any configuration.

Environment variables:
    DIRECTORY_API_URL: Listing endpoint to load advocates from. Empty means the
        built-in seed list is served and read in-process (default: empty)
    DIRECTORY_DEBOUNCE_MS: Idle time before a typed search is applied (default: 300)
    DIRECTORY_PHONE_REGION: Region used to format phone numbers (default: US)
    DIRECTORY_HTTP_TIMEOUT: Seconds to wait for the listing endpoint (default: 6.0)
    DIRECTORY_LOG_FORMAT: "text" or "json" (default: text)
    DIRECTORY_HOST: Bind address for the dev server (default: 127.0.0.1)
    DIRECTORY_PORT: Port for the dev server (default: 8000)
    DIRECTORY_SECRET_KEY: Key signing the browser session cookie. Empty means a
        random key per process, so sessions do not survive a restart (default: empty)
"""

import os
from dataclasses import dataclass


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


@dataclass(frozen=True)
class DirectoryConfig:
    api_url: str = ""
    debounce_ms: int = 300
    phone_region: str = "US"
    http_timeout: float = 6.0
    log_format: str = "text"
    host: str = "127.0.0.1"
    port: int = 8000
    secret_key: str = ""

    @property
    def debounce_seconds(self) -> float:
        return self.debounce_ms / 1000.0

    @classmethod
    def from_env(cls) -> "DirectoryConfig":
        """Create a DirectoryConfig populated from environment variables."""
        log_format = os.getenv("DIRECTORY_LOG_FORMAT", "text").strip().lower()
        if log_format not in ("text", "json"):
            raise ValueError(f"DIRECTORY_LOG_FORMAT must be text or json, got {log_format!r}")
        debounce_ms = int(_env_float("DIRECTORY_DEBOUNCE_MS", 300))
        if debounce_ms < 0:
            raise ValueError("DIRECTORY_DEBOUNCE_MS must be non-negative")
        return cls(
            api_url=os.getenv("DIRECTORY_API_URL", "").strip(),
            debounce_ms=debounce_ms,
            phone_region=os.getenv("DIRECTORY_PHONE_REGION", "US").strip().upper() or "US",
            http_timeout=_env_float("DIRECTORY_HTTP_TIMEOUT", 6.0),
            log_format=log_format,
            host=os.getenv("DIRECTORY_HOST", "127.0.0.1"),
            port=int(_env_float("DIRECTORY_PORT", 8000)),
            secret_key=os.getenv("DIRECTORY_SECRET_KEY", ""),
        )
