"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Los valores por defecto de las opciones del avatar salen de un único sitio.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PREFIX = "AVATAR_LINK_"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "avatar-link"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "avatar-link"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "avatar-link"
    return Path.home() / ".config" / "avatar-link"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def read_user_env_vars() -> dict[str, str]:
    env_path = get_user_env_file()
    if not env_path.exists():
        return {}
    return _parse_env_lines(env_path.read_text(encoding="utf-8"))


def write_user_env_vars(values: dict[str, str]) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing = read_user_env_vars()
    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# avatar-link user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para la CLI y el builder.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    service_domain: str = Field(
        default="gravatar.com",
        min_length=3,
        description="Dominio del servicio de avatares (sin esquema ni subdominio).",
    )
    default_image: str = Field(
        default="404",
        min_length=1,
        description="Valor por defecto de la opción `default`.",
    )
    default_size: int = Field(
        default=200,
        gt=0,
        description="Valor por defecto de la opción `size`.",
    )
    require_type: bool = Field(
        default=False,
        description="Valor por defecto de la opción `requireType`.",
    )
    secure: bool | None = Field(
        default=None,
        description="Valor por defecto de la opción `secure` (None => no se emite).",
    )
    log_level: str = Field(
        default="INFO",
        min_length=1,
        description="Nivel de logging (DEBUG, INFO, WARNING...).",
    )

    @classmethod
    def env_name(cls, field_name: str) -> str:
        """Nombre de la variable de entorno para un campo (`size` -> `AVATAR_LINK_SIZE`)."""

        return f"{ENV_PREFIX}{field_name.upper()}"
