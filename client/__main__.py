"""Render the client view once against a running API.

Usage::

    python -m client [--base-url URL] [--user-id ID] [--all]
"""

import typer

from config.settings import settings
from config.logging_config import setup_logging
from client.api_client import UsersApiClient
from client.app_state import AppState


app = typer.Typer(help="User directory client", add_completion=False)


@app.command()
def show(
    base_url: str = typer.Option(settings.CLIENT_API_BASE_URL, "--base-url", help="API base URL"),
    user_id: int = typer.Option(settings.CLIENT_INITIAL_USER_ID, "--user-id", help="User loaded on mount"),
    all_users: bool = typer.Option(False, "--all", help="Load every user instead of one"),
) -> None:
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE or None)

    api = UsersApiClient(base_url=base_url, timeout=settings.CLIENT_TIMEOUT_SECONDS)
    state = AppState(api, initial_user_id=user_id)
    if all_users:
        state.fetch_all_users()
    else:
        state.mount()

    for line in state.render():
        typer.echo(line)


if __name__ == "__main__":
    app()
