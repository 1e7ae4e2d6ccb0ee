"""CLI configuration with XDG-compliant paths and environment variable overrides."""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path

from tdma_client.config import DEFAULT_BASE_URL, TDMAConfig
from tdma_client.models import Credentials


def default_config_dir() -> Path:
    """Get XDG-compliant config directory for the CLI.

    Uses XDG_CONFIG_HOME if set, otherwise ~/.config/tdma-cli.
    """
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config) / "tdma-cli"
    return Path.home() / ".config" / "tdma-cli"


@dataclass
class CLIConfig:
    """Configuration passed through Typer context.

    Attributes:
        base_url: API base URL.
        verbose: Enable verbose output.
        config_dir: Directory holding credentials.json.
    """

    base_url: str = DEFAULT_BASE_URL
    verbose: bool = False
    config_dir: Path = field(default_factory=default_config_dir)

    @property
    def credentials_path(self) -> Path:
        """Get the credentials file path."""
        return self.config_dir / "credentials.json"

    def api_config(self) -> TDMAConfig:
        """Library config for this CLI invocation."""
        return TDMAConfig(base_url=self.base_url)

    def load_credentials(self) -> Credentials:
        """Load credentials from config file with environment variable overrides.

        Loading priority:
        1. Load from credentials.json in the config directory
        2. Override the access token with TDMA_ACCESS_TOKEN if set

        Raises:
            ValueError: If no access token can be determined
        """
        data: dict[str, object] = {}

        if self.credentials_path.exists():
            try:
                with self.credentials_path.open() as f:
                    data = json.load(f)
            except (json.JSONDecodeError, OSError) as e:
                msg = f"Failed to read {self.credentials_path}: {e}"
                raise ValueError(msg) from e

        if env_token := os.environ.get("TDMA_ACCESS_TOKEN"):
            data["access_token"] = env_token

        if not data.get("access_token"):
            msg = (
                "Missing access token. Set TDMA_ACCESS_TOKEN "
                f"or create a credentials file at {self.credentials_path}"
            )
            raise ValueError(msg)

        return Credentials.model_validate(data)
