"""TD Ameritrade CLI - Command-line interface for the account API."""

from tdma_client.cli.app import app

# Import command modules to register them with the app
from tdma_client.cli.commands import accounts, orders, principals, transactions

# Register sub-apps
app.add_typer(accounts.app, name="accounts", help="Account information.")
app.add_typer(transactions.app, name="transactions", help="Transaction history.")
app.add_typer(orders.app, name="orders", help="Order lookup.")
app.add_typer(principals.app, name="principals", help="User principals.")


def main() -> None:
    """Entry point for the CLI."""
    app()


__all__ = ["app", "main"]
