"""CLI principal (Typer).

Por qué Typer:
- Opciones tipadas y ayuda generada sin boilerplate.
- Los comandos delegan todo en `core.services`; aquí solo hay parseo y salida.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.json_exporter import dump_links_json, export_links_json
from cli import config_cmd
from cli.ui_components import build_links_table
from core.config import AppSettings
from core.domain.errors import InvalidInputError
from core.domain.models import AvatarLink
from core.interfaces.link_builder import AvatarLinkSource
from core.logging_config import configure_logging
from core.services.avatar_link import AvatarLinkBuilder
from core.services.identity import build_identity

app = typer.Typer(
    no_args_is_help=True,
    help="Build avatar image URLs (Gravatar convention) from email addresses.",
)
app.add_typer(config_cmd.app, name="config")

_console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    try:
        settings = AppSettings()
    except ValidationError as exc:
        raise typer.BadParameter(str(exc), param_hint="AVATAR_LINK_* settings") from exc
    configure_logging(debug=verbose, level_name=None if verbose else settings.log_level)


def _parse_extras(extras: list[str] | None) -> dict[str, str]:
    parsed: dict[str, str] = {}
    for item in extras or []:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"expected KEY=VALUE, got {item!r}", param_hint="--extra")
        parsed[key] = value
    return parsed


def _collect_overrides(
    *,
    size: int | None,
    default: str | None,
    secure: bool | None,
    require_type: bool | None,
    extras: list[str] | None,
) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    if default is not None:
        overrides["default"] = default
    if require_type is not None:
        overrides["requireType"] = require_type
    if size is not None:
        overrides["size"] = size
    if secure is not None:
        overrides["secure"] = secure
    overrides.update(_parse_extras(extras))
    return overrides


def _links_for(emails: list[str], overrides: dict[str, Any]) -> list[AvatarLink]:
    links: list[AvatarLink] = []
    for email in emails:
        try:
            source: AvatarLinkSource = AvatarLinkBuilder(email)
            links.append(source.to_link(overrides))
        except InvalidInputError as exc:
            raise typer.BadParameter(str(exc), param_hint="EMAIL") from exc
    return links


@app.command()
def url(
    emails: list[str] = typer.Argument(..., help="One or more email addresses."),
    size: int | None = typer.Option(None, "--size", "-s", min=1, help="Image size in pixels."),
    default: str | None = typer.Option(None, "--default", "-d", help="Fallback image token."),
    secure: bool | None = typer.Option(None, "--secure/--insecure", help="Use the https host."),
    require_type: bool | None = typer.Option(
        None, "--require-type/--no-require-type", help="Append .jpg to the path."
    ),
    extra: list[str] | None = typer.Option(None, "--extra", "-e", help="Passthrough KEY=VALUE option."),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of plain URLs."),
    table: bool = typer.Option(False, "--table", help="Print a Rich table."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Also write JSON to this file."),
) -> None:
    """Print the avatar URL for each EMAIL."""

    overrides = _collect_overrides(
        size=size,
        default=default,
        secure=secure,
        require_type=require_type,
        extras=extra,
    )
    links = _links_for(emails, overrides)

    if as_json:
        typer.echo(dump_links_json(links), nl=False)
    elif table:
        _console.print(build_links_table(links))
    else:
        for link in links:
            typer.echo(link.url)

    if output is not None:
        path = export_links_json(links=links, output_path=output)
        typer.echo(f"Saved JSON to: {path}", err=True)


@app.command(name="hash")
def hash_email(email: str = typer.Argument(..., help="Email address.")) -> None:
    """Print the normalized email's hash."""

    try:
        identity = build_identity(email)
    except InvalidInputError as exc:
        raise typer.BadParameter(str(exc), param_hint="EMAIL") from exc
    typer.echo(identity.hash)


def run() -> None:
    app()
