"""Configuration management for the backend record source."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path

from ledger_reports.exceptions import ConfigError


def default_config_dir() -> Path:
    """Get XDG-compliant config directory.

    Uses XDG_CONFIG_HOME if set, otherwise ~/.config/ledger-reports.
    """
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config) / "ledger-reports"
    return Path.home() / ".config" / "ledger-reports"


@dataclass(frozen=True, slots=True)
class SourceConfig:
    """Connection settings for the PostgREST backend holding the ledger."""

    url: str
    api_key: str
    schema: str = "public"
    timeout: float = 30.0

    @property
    def rest_url(self) -> str:
        """Get the REST endpoint base URL."""
        return f"{self.url.rstrip('/')}/rest/v1"

    @classmethod
    def from_env(cls) -> SourceConfig:
        """Create config from environment variables.

        Expected env vars:
        - SUPABASE_URL
        - SUPABASE_KEY
        """
        url = os.environ.get("SUPABASE_URL")
        api_key = os.environ.get("SUPABASE_KEY")

        if not url or not api_key:
            msg = "Missing required environment variables: SUPABASE_URL and SUPABASE_KEY"
            raise ConfigError(msg)

        return cls(url=url, api_key=api_key)

    @classmethod
    def from_file(cls, path: Path | None = None) -> SourceConfig:
        """Load config from JSON file.

        Default path: ~/.config/ledger-reports/config.json

        Expected format:
        {
            "url": "https://<project>.supabase.co",
            "api_key": "..."
        }
        """
        if path is None:
            path = default_config_dir() / "config.json"

        if not path.exists():
            msg = f"Config file not found: {path}"
            raise ConfigError(msg)

        try:
            with path.open() as f:
                data = json.load(f)
            return cls(
                url=data["url"],
                api_key=data["api_key"],
                schema=data.get("schema", "public"),
                timeout=float(data.get("timeout", 30.0)),
            )
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            msg = f"Invalid config file {path}: {e}"
            raise ConfigError(msg) from e

    @classmethod
    def load(cls, path: Path | None = None) -> SourceConfig:
        """Load config from environment or file (env takes precedence)."""
        try:
            return cls.from_env()
        except ConfigError:
            return cls.from_file(path)
