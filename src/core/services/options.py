"""Opciones del avatar: asignación, merge y render a query string.

Por qué separado del builder:
- El merge (shallow, gana el override) y el render son funciones puras que
  se testean sin instanciar un builder.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from core.config import AppSettings
from core.domain.models import AvatarOptions
from core.logging_config import get_logger

logger = get_logger(__name__)

# Clave pública (la de la query string) -> campo del modelo.
_FIELD_BY_KEY: dict[str, str] = {
    "default": "default",
    "requireType": "require_type",
    "require_type": "require_type",
    "size": "size",
    "secure": "secure",
}

_QUERY_KEY_BY_FIELD: dict[str, str] = {
    "default": "default",
    "require_type": "requireType",
    "size": "size",
    "secure": "secure",
}


def default_options(settings: AppSettings | None = None) -> AvatarOptions:
    """Opciones iniciales: `default=404, requireType=false, size=200` salvo config."""

    settings = settings or AppSettings()
    return AvatarOptions(
        default=settings.default_image,
        require_type=settings.require_type,
        size=settings.default_size,
        secure=settings.secure,
    )


def render_value(value: Any) -> str:
    """Forma textual de un valor en la query (falsy -> "", bool en minúsculas)."""

    if isinstance(value, bool):
        return "true" if value else "false"
    if not value:
        return ""
    return str(value)


def apply_option(options: AvatarOptions, name: Any, value: Any) -> bool:
    """Asigna una opción in-place. Devuelve False si `name` no es texto (se ignora).

    Las claves reconocidas pasan por la validación del modelo. Si el valor no
    encaja, el campo queda en `None` y el valor original se guarda en
    `raw_values` para emitirlo tal cual. El resto va como texto a `extras`.
    """

    if not isinstance(name, str):
        logger.debug("Ignoring option with non-string key %r", name)
        return False

    field = _FIELD_BY_KEY.get(name)
    if field is None:
        options.extras[name] = render_value(value)
        options.note_key(name)
        return True

    key = _QUERY_KEY_BY_FIELD[field]
    try:
        setattr(options, field, value)
    except ValidationError:
        logger.debug("Keeping unvalidated value for option %s: %r", key, value)
        setattr(options, field, None)
        options.raw_values[key] = value
    else:
        options.raw_values.pop(key, None)
    options.note_key(key)
    return True


def explicit_items(options: AvatarOptions) -> list[tuple[str, Any]]:
    """Opciones asignadas explícitamente, en orden de inserción."""

    items: list[tuple[str, Any]] = []
    for key in options.keys():
        field = _FIELD_BY_KEY.get(key)
        if field is None:
            items.append((key, options.extras[key]))
        elif key in options.raw_values:
            items.append((key, options.raw_values[key]))
        elif field in options.model_fields_set:
            items.append((key, getattr(options, field)))
    return items


def merge_options(base: AvatarOptions, override: Any = None) -> AvatarOptions:
    """Devuelve una copia de `base` con `override` aplicado encima (shallow).

    `override` puede ser un mapping o un `AvatarOptions` (solo sus campos
    asignados explícitamente). Cualquier otro tipo se ignora.
    """

    merged = base.model_copy(deep=True)

    if isinstance(override, AvatarOptions):
        override = dict(explicit_items(override))
    if isinstance(override, Mapping):
        for key, value in override.items():
            apply_option(merged, key, value)

    return merged


def query_pairs(options: AvatarOptions) -> list[tuple[str, str]]:
    """Pares `(clave, valor)` en el orden en que se asignaron las claves."""

    pairs: list[tuple[str, str]] = []
    for key in options.keys():
        field = _FIELD_BY_KEY.get(key)
        if field is None:
            pairs.append((key, options.extras[key]))
        elif key in options.raw_values:
            pairs.append((key, render_value(options.raw_values[key])))
        else:
            pairs.append((key, render_value(getattr(options, field))))
    return pairs


def render_query(options: AvatarOptions) -> str:
    return "&".join(f"{key}={value}" for key, value in query_pairs(options))
