"""Main Typer application."""

import logging
from pathlib import Path

import typer

from tdma_client.cli.config import CLIConfig, default_config_dir
from tdma_client.config import DEFAULT_BASE_URL

# Create main app
app = typer.Typer(
    name="tdma-cli",
    help="TD Ameritrade account API command-line interface.",
    no_args_is_help=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    base_url: str = typer.Option(
        DEFAULT_BASE_URL,
        "--base-url",
        help="API base URL.",
        envvar="TDMA_BASE_URL",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose (debug) logging.",
    ),
    config_dir: Path | None = typer.Option(
        None,
        "--config-dir",
        "-c",
        help="Config directory (default: ~/.config/tdma-cli).",
        envvar="TDMA_CLI_CONFIG_DIR",
    ),
) -> None:
    """TD Ameritrade account API command-line interface.

    Every command accepts --url-only to print the request URL without
    contacting the API.
    """
    if verbose:
        logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
        logging.getLogger("tdma_client").setLevel(logging.DEBUG)

    ctx.obj = CLIConfig(
        base_url=base_url,
        verbose=verbose,
        config_dir=config_dir or default_config_dir(),
    )
