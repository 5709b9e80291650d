"""Config commands: inspect and persist default options."""

from __future__ import annotations

import typer
from pydantic import ValidationError
from rich.console import Console

from cli.ui_components import build_settings_table
from core.config import AppSettings, get_user_env_file, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Show or change the stored default options.")

_console = Console()


@app.command()
def show() -> None:
    """Show the effective configuration (env vars + .env files)."""

    settings = AppSettings()
    _console.print(build_settings_table(settings))
    _console.print(f"[dim]User config file:[/dim] {get_user_env_file()}")


@app.command(name="set")
def set_values(
    assignments: list[str] = typer.Argument(..., help="KEY=VALUE pairs, e.g. default_size=80"),
) -> None:
    """Store defaults in the user config .env (validated before writing)."""

    fields = AppSettings.model_fields
    values: dict[str, str] = {}
    for item in assignments:
        key, sep, value = item.partition("=")
        key = key.strip().lower()
        if not sep or not key:
            raise typer.BadParameter(f"expected KEY=VALUE, got {item!r}")
        if key not in fields:
            raise typer.BadParameter(f"unknown setting {key!r} (known: {', '.join(fields)})")
        values[key] = value.strip()

    try:
        AppSettings.model_validate(values)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc

    env_path = write_user_env_vars({AppSettings.env_name(k): v for k, v in values.items()})
    _console.print(f"[green]Saved config to:[/green] {env_path}")
