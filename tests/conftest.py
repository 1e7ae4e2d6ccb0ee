"""Shared fixtures."""

import pytest

from tdma_client import Credentials, TDMAConfig


@pytest.fixture
def credentials() -> Credentials:
    """Credentials with a dummy access token."""
    return Credentials(access_token="test_token", client_id="TEST@AMER.OAUTHAP")


@pytest.fixture
def config() -> TDMAConfig:
    """Default production configuration."""
    return TDMAConfig()
