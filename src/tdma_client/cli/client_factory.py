"""Client factory for CLI commands."""

from __future__ import annotations

from collections.abc import AsyncGenerator, Callable
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import typer

from tdma_client.cli.formatters import print_document, print_error, print_url
from tdma_client.client import TDMAClient
from tdma_client.models import Credentials

if TYPE_CHECKING:
    from tdma_client.cli.config import CLIConfig
    from tdma_client.getters import APIGetter


@asynccontextmanager
async def get_client(config: CLIConfig, *, anonymous: bool = False) -> AsyncGenerator[TDMAClient]:
    """Create a TDMAClient for CLI use.

    With ``anonymous`` no credentials are loaded; the client can build URLs
    but not fetch them.
    """
    if anonymous:
        credentials = Credentials()
    else:
        try:
            credentials = config.load_credentials()
        except ValueError as e:
            print_error(str(e))
            raise typer.Exit(1) from None

    async with TDMAClient(credentials, config.api_config()) as client:
        yield client


async def run_getter(
    config: CLIConfig,
    build: Callable[[TDMAClient], APIGetter],
    *,
    url_only: bool = False,
) -> None:
    """Build a getter, then print its URL or fetch and print the response."""
    async with get_client(config, anonymous=url_only) as client:
        with build(client) as getter:
            if url_only:
                print_url(getter.url)
                return
            print_document(await getter.get_json())
