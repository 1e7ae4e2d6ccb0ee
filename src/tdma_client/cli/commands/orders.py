"""Orders commands."""

import typer

from tdma_client.cli.async_runner import async_command
from tdma_client.cli.client_factory import run_getter
from tdma_client.cli.config import CLIConfig
from tdma_client.types import OrderStatusType

app = typer.Typer(no_args_is_help=True)


@app.command("list")
@async_command
async def list_orders(
    ctx: typer.Context,
    account_id: str = typer.Argument(..., help="Account ID."),
    from_time: str = typer.Option(
        ...,
        "--from",
        help="Earliest entered time (ISO-8601 date or date/time).",
    ),
    to_time: str = typer.Option(
        ...,
        "--to",
        help="Latest entered time (ISO-8601 date or date/time).",
    ),
    limit: int = typer.Option(
        10,
        "--limit",
        "-n",
        help="Maximum orders to return.",
    ),
    status: OrderStatusType = typer.Option(
        OrderStatusType.ALL,
        "--status",
        help="Order status filter.",
    ),
    url_only: bool = typer.Option(False, "--url-only", help="Print the request URL and exit."),
) -> None:
    """List orders entered within a time window."""
    config: CLIConfig = ctx.obj
    await run_getter(
        config,
        lambda client: client.orders(
            account_id,
            nmax_results=limit,
            from_entered_time=from_time,
            to_entered_time=to_time,
            order_status_type=status,
        ),
        url_only=url_only,
    )


@app.command("get")
@async_command
async def get_order(
    ctx: typer.Context,
    account_id: str = typer.Argument(..., help="Account ID."),
    order_id: str = typer.Argument(..., help="Order ID."),
    url_only: bool = typer.Option(False, "--url-only", help="Print the request URL and exit."),
) -> None:
    """Get a single order."""
    config: CLIConfig = ctx.obj
    await run_getter(config, lambda client: client.order(account_id, order_id), url_only=url_only)
