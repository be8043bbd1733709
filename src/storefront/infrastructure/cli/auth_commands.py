"""CLI commands for the mock login session."""

from __future__ import annotations

import click

from storefront.application.authenticate import LoginHandler, LogoutHandler, RegisterHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import session_repository, user_repository


@click.command("login")
@click.option("--email", required=True, help="Account email.")
@click.password_option("--password", confirmation_prompt=False, help="Account password.")
def auth_login(email: str, password: str) -> None:
    """Log in with a demo account."""
    handler = LoginHandler(user_repo=user_repository(), session_repo=session_repository())
    user = handler.handle(email, password)
    if user is None:
        raise click.ClickException("Invalid email or password")
    click.echo(f"Welcome back, {user.name}!")


@click.command("register")
@click.option("--name", required=True, help="Your name.")
@click.option("--email", required=True, help="Account email.")
@click.password_option("--password", help="Account password.")
def auth_register(name: str, email: str, password: str) -> None:
    """Create an account for this session."""
    handler = RegisterHandler(user_repo=user_repository(), session_repo=session_repository())

    try:
        user = handler.handle(name, email, password)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if user is None:
        raise click.ClickException(f"An account with {email} already exists")
    click.echo(f"Account created. Welcome, {user.name}!")


@click.command("logout")
def auth_logout() -> None:
    """End the current session."""
    LogoutHandler(session_repo=session_repository()).handle()
    click.echo("Logged out.")


@click.command("whoami")
def auth_whoami() -> None:
    """Show the logged-in user."""
    user = session_repository().current_user()
    if user is None:
        click.echo("Not logged in.")
        return
    click.echo(f"{user.name} <{user.email}> ({user.role.value})")
