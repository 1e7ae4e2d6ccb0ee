"""Transactions commands."""

import typer

from tdma_client.cli.async_runner import async_command
from tdma_client.cli.client_factory import run_getter
from tdma_client.cli.config import CLIConfig
from tdma_client.types import TransactionType

app = typer.Typer(no_args_is_help=True)


@app.command("list")
@async_command
async def list_transactions(
    ctx: typer.Context,
    account_id: str = typer.Argument(..., help="Account ID."),
    transaction_type: TransactionType = typer.Option(
        TransactionType.ALL,
        "--type",
        "-t",
        help="Transaction type filter.",
    ),
    symbol: str = typer.Option("", "--symbol", "-s", help="Symbol filter."),
    from_date: str = typer.Option("", "--from", help="Start date (ISO-8601 date or date/time)."),
    to_date: str = typer.Option("", "--to", help="End date (ISO-8601 date or date/time)."),
    url_only: bool = typer.Option(False, "--url-only", help="Print the request URL and exit."),
) -> None:
    """List transactions for an account."""
    config: CLIConfig = ctx.obj
    await run_getter(
        config,
        lambda client: client.transaction_history(
            account_id,
            transaction_type=transaction_type,
            symbol=symbol,
            start_date=from_date,
            end_date=to_date,
        ),
        url_only=url_only,
    )


@app.command("get")
@async_command
async def get_transaction(
    ctx: typer.Context,
    account_id: str = typer.Argument(..., help="Account ID."),
    transaction_id: str = typer.Argument(..., help="Transaction ID."),
    url_only: bool = typer.Option(False, "--url-only", help="Print the request URL and exit."),
) -> None:
    """Get a single transaction."""
    config: CLIConfig = ctx.obj
    await run_getter(
        config,
        lambda client: client.individual_transaction_history(account_id, transaction_id),
        url_only=url_only,
    )
