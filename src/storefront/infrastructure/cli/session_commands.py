"""CLI commands for the signed-in session."""

from __future__ import annotations

import click

from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import session_store


@click.command("login")
@click.option("--user", "user_id", required=True, help="Admin user ID.")
def session_login(user_id: str) -> None:
    """Sign in as an admin user."""
    try:
        user = session_store().login(user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Signed in as {user.user_id}")


@click.command("logout")
def session_logout() -> None:
    """Sign out."""
    if session_store().logout():
        click.echo("Signed out.")
    else:
        click.echo("Not signed in.")


@click.command("whoami")
def session_whoami() -> None:
    """Show the signed-in user."""
    user = session_store().current_user()
    click.echo(user.user_id if user else "Not signed in.")
