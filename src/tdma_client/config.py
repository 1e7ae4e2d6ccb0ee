"""Configuration management for TD Ameritrade client."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_BASE_URL = "https://api.tdameritrade.com/v1"
DEFAULT_TIMEOUT = 30.0


def _get_config_dir() -> Path:
    """Get XDG-compliant config directory."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config) / "tdma-client"
    return Path.home() / ".config" / "tdma-client"


@dataclass(frozen=True, slots=True)
class TDMAConfig:
    """TD Ameritrade API configuration."""

    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    @property
    def api_base_url(self) -> str:
        """Base URL every endpoint path is appended to (with trailing slash)."""
        return self.base_url.rstrip("/") + "/"

    @property
    def accounts_url(self) -> str:
        """Root URL for account-scoped endpoints."""
        return f"{self.api_base_url}accounts/"

    @classmethod
    def from_env(cls) -> TDMAConfig:
        """Create config from environment variables.

        Optional env vars:
        - TDMA_BASE_URL
        - TDMA_TIMEOUT
        """
        base_url = os.environ.get("TDMA_BASE_URL") or DEFAULT_BASE_URL
        timeout_str = os.environ.get("TDMA_TIMEOUT")

        try:
            timeout = float(timeout_str) if timeout_str else DEFAULT_TIMEOUT
        except ValueError:
            msg = f"Invalid TDMA_TIMEOUT: {timeout_str}"
            raise ValueError(msg) from None

        return cls(base_url=base_url, timeout=timeout)

    @classmethod
    def from_file(cls, path: Path | None = None) -> TDMAConfig:
        """Load config from JSON file.

        Default path: ~/.config/tdma-client/config.json

        Expected format:
        {
            "base_url": "...",
            "timeout": 30.0
        }
        """
        if path is None:
            path = _get_config_dir() / "config.json"

        if not path.exists():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)

        with path.open() as f:
            data = json.load(f)

        return cls(
            base_url=data.get("base_url", DEFAULT_BASE_URL),
            timeout=float(data.get("timeout", DEFAULT_TIMEOUT)),
        )

    @classmethod
    def load(cls) -> TDMAConfig:
        """Load config from environment or file (env takes precedence)."""
        if os.environ.get("TDMA_BASE_URL") or os.environ.get("TDMA_TIMEOUT"):
            return cls.from_env()
        try:
            return cls.from_file()
        except FileNotFoundError:
            return cls()
