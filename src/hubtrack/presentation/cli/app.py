"""Hubtrack CLI application using Typer.

Provides command-line utilities for the Hubtrack backend: secret
generation for deployment configuration and running the API server.
"""

import secrets

import typer
from rich.console import Console

app = typer.Typer(
    name="hubtrack",
    help="Hubtrack - team time tracking CLI",
    no_args_is_help=True,
)
console = Console()


secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)


def generate_jwt_secret() -> str:
    # 64 random bytes, well above the HS256 key size
    return secrets.token_urlsafe(64)


def generate_db_password() -> str:
    return secrets.token_urlsafe(32)


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate secure secrets for Hubtrack configuration.

    Generates the two required secrets:
    - JWT_SECRET_KEY: Secret for signing session and reset tokens
    - POSTGRES_PASSWORD: Database password

    Copy the output to your .env file.
    """
    console.print("\n[bold green]Hubtrack Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print("\nGenerated secrets for your [bold].env[/bold] file:\n")

    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={generate_jwt_secret()}")
    console.print(f"[cyan]POSTGRES_PASSWORD[/cyan]={generate_db_password()}")

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]Keep these secrets out of version control. Rotating "
        "JWT_SECRET_KEY signs every user out.[/yellow]"
    )
    console.print(
        "[dim]Copy the above values to config/.env (Docker) or "
        "config/.env.dev (local).[/dim]\n"
    )


@app.command("serve")
def serve(
    host: str = typer.Option(None, help="Bind address (defaults to API_HOST)"),
    port: int = typer.Option(None, help="Port (defaults to API_PORT)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the Hubtrack API with uvicorn."""
    import uvicorn

    from hubtrack_config.settings import get_settings

    settings = get_settings()
    uvicorn.run(
        "hubtrack.presentation.api.app:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
        log_config=None,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
