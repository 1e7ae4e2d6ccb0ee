"""User principals commands."""

import typer

from tdma_client.cli.async_runner import async_command
from tdma_client.cli.client_factory import get_client, run_getter
from tdma_client.cli.config import CLIConfig
from tdma_client.cli.formatters import print_document

app = typer.Typer(no_args_is_help=True)


@app.command("get")
@async_command
async def get_principals(
    ctx: typer.Context,
    subscription_keys: bool = typer.Option(
        False, "--subscription-keys", help="Include streamer subscription keys."
    ),
    connection_info: bool = typer.Option(
        False, "--connection-info", help="Include streamer connection info."
    ),
    preferences: bool = typer.Option(False, "--preferences", help="Include preferences."),
    surrogate_ids: bool = typer.Option(False, "--surrogate-ids", help="Include surrogate ids."),
    url_only: bool = typer.Option(False, "--url-only", help="Print the request URL and exit."),
) -> None:
    """Get user principal details."""
    config: CLIConfig = ctx.obj
    await run_getter(
        config,
        lambda client: client.user_principals(
            streamer_subscription_keys=subscription_keys,
            streamer_connection_info=connection_info,
            preferences=preferences,
            surrogate_ids=surrogate_ids,
        ),
        url_only=url_only,
    )


@app.command("streaming")
@async_command
async def streaming(ctx: typer.Context) -> None:
    """Get the principals needed to open a streaming session."""
    config: CLIConfig = ctx.obj
    async with get_client(config) as client:
        print_document(await client.user_principals_for_streaming())
