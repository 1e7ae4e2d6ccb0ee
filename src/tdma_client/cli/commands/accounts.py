"""Account commands."""

import typer

from tdma_client.cli.async_runner import async_command
from tdma_client.cli.client_factory import run_getter
from tdma_client.cli.config import CLIConfig

app = typer.Typer(no_args_is_help=True)


@app.command("info")
@async_command
async def account_info(
    ctx: typer.Context,
    account_id: str = typer.Argument(..., help="Account ID."),
    positions: bool = typer.Option(False, "--positions", help="Include positions."),
    orders: bool = typer.Option(False, "--orders", help="Include orders."),
    url_only: bool = typer.Option(False, "--url-only", help="Print the request URL and exit."),
) -> None:
    """Get account balances, optionally with positions and orders."""
    config: CLIConfig = ctx.obj
    await run_getter(
        config,
        lambda client: client.account_info(account_id, positions=positions, orders=orders),
        url_only=url_only,
    )


@app.command("preferences")
@async_command
async def preferences(
    ctx: typer.Context,
    account_id: str = typer.Argument(..., help="Account ID."),
    url_only: bool = typer.Option(False, "--url-only", help="Print the request URL and exit."),
) -> None:
    """Get account preferences."""
    config: CLIConfig = ctx.obj
    await run_getter(config, lambda client: client.preferences(account_id), url_only=url_only)


@app.command("subscription-keys")
@async_command
async def subscription_keys(
    ctx: typer.Context,
    account_id: str = typer.Argument(..., help="Account ID."),
    url_only: bool = typer.Option(False, "--url-only", help="Print the request URL and exit."),
) -> None:
    """Get streamer subscription keys for an account."""
    config: CLIConfig = ctx.obj
    await run_getter(
        config,
        lambda client: client.streamer_subscription_keys(account_id),
        url_only=url_only,
    )
