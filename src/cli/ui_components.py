"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas en múltiples comandos.
"""

from __future__ import annotations

from collections.abc import Iterable

from rich.table import Table

from core.config import AppSettings
from core.domain.models import AvatarLink


def build_links_table(links: Iterable[AvatarLink]) -> Table:
    """Tabla Rich con un enlace por fila."""

    table = Table(title="Avatar Links")
    table.add_column("Email", style="cyan", no_wrap=True)
    table.add_column("Hash", style="dim")
    table.add_column("Secure", style="green")
    table.add_column("URL", style="magenta", overflow="fold")
    for link in links:
        table.add_row(link.email, link.hash, "yes" if link.secure else "no", link.url)
    return table


def build_settings_table(settings: AppSettings) -> Table:
    """Tabla con la configuración efectiva y la variable de entorno de cada campo."""

    table = Table(title="avatar-link config")
    table.add_column("Setting", style="bright_green", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_column("Env var", style="dim")
    for name in type(settings).model_fields:
        value = getattr(settings, name)
        table.add_row(name, "" if value is None else str(value), AppSettings.env_name(name))
    return table
