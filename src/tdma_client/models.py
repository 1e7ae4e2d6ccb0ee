"""Credential model shared (read-only) by every getter."""

from __future__ import annotations

import json
import os
import time
from pathlib import Path

from pydantic import BaseModel, Field


def _get_credentials_path() -> Path:
    """Get default credentials storage path."""
    xdg_data = os.environ.get("XDG_DATA_HOME")
    base = Path(xdg_data) if xdg_data else Path.home() / ".local" / "share"
    return base / "tdma-client" / "credentials.json"


class Credentials(BaseModel):
    """OAuth credentials for the TD Ameritrade API.

    Owned by the caller; getters only read ``access_token``. Refreshing
    tokens is the caller's job.
    """

    access_token: str = Field(default="", description="Bearer access token")
    refresh_token: str = Field(default="", description="OAuth refresh token")
    epoch_sec_token_expiration: int = Field(
        default=0, description="Access token expiration (seconds since epoch)"
    )
    client_id: str = Field(default="", description="Registered application client id")

    model_config = {"frozen": True}

    @property
    def is_expired(self) -> bool:
        """Check if the access token has passed its expiration time.

        A zero expiration means unknown and is treated as not expired.
        """
        if not self.epoch_sec_token_expiration:
            return False
        return time.time() >= self.epoch_sec_token_expiration

    def auth_headers(self) -> dict[str, str]:
        """Headers authorizing a request with this access token."""
        return {"Authorization": f"Bearer {self.access_token}"}

    @classmethod
    def from_env(cls) -> Credentials:
        """Create credentials from environment variables.

        Expects TDMA_ACCESS_TOKEN; TDMA_REFRESH_TOKEN and TDMA_CLIENT_ID
        are optional.
        """
        access_token = os.environ.get("TDMA_ACCESS_TOKEN")
        if not access_token:
            msg = "Missing required environment variable: TDMA_ACCESS_TOKEN"
            raise ValueError(msg)

        return cls(
            access_token=access_token,
            refresh_token=os.environ.get("TDMA_REFRESH_TOKEN", ""),
            client_id=os.environ.get("TDMA_CLIENT_ID", ""),
        )

    @classmethod
    def from_file(cls, path: Path | None = None) -> Credentials:
        """Load credentials from a JSON file.

        Default path: ~/.local/share/tdma-client/credentials.json
        """
        path = path or _get_credentials_path()
        if not path.exists():
            msg = f"Credentials file not found: {path}"
            raise FileNotFoundError(msg)

        with path.open() as f:
            data = json.load(f)

        return cls.model_validate(data)

    def save(self, path: Path | None = None) -> None:
        """Write credentials to a JSON file readable only by the owner."""
        path = path or _get_credentials_path()
        path.parent.mkdir(parents=True, exist_ok=True)

        with path.open("w") as f:
            json.dump(self.model_dump(), f, indent=2)

        path.chmod(0o600)
