"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Las cuatro opciones reconocidas (`default`, `requireType`, `size`, `secure`)
  quedan tipadas con sus valores por defecto, en lugar de un dict libre.
- Las claves desconocidas se conservan aparte (`extras`) y se reenvían tal cual
  a la query string.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se calcula.
"""

from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, Field, PrivateAttr
from pydantic.config import ConfigDict

OptionValue = Union[str, bool, int, float]


class Identity(BaseModel):
    """Email normalizado y su hash.

    Se construye solo desde `core.services.identity.build_identity`, que
    calcula ambos campos a la vez; el modelo es inmutable para que nunca se
    desincronicen.
    """

    model_config = ConfigDict(frozen=True)

    email: str = Field(
        ...,
        min_length=1,
        description="Email normalizado (strip + lower).",
    )
    hash: str = Field(
        ...,
        min_length=32,
        max_length=32,
        description="Digest MD5 hexadecimal del email normalizado.",
    )


class AvatarOptions(BaseModel):
    """Opciones de presentación del avatar.

    Por qué `validate_assignment`:
    - Los setters del builder asignan campo a campo; un valor que no encaja en
      el tipo del campo se guarda tal cual en `raw_values` y se emite como
      texto en la query (no es un error).

    El orden de las claves (`keys()`) es el de inserción, igual que en la
    query string.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        validate_assignment=True,
        extra="ignore",
    )

    default: OptionValue | None = Field(
        default=404,
        description="Imagen de reserva cuando no hay avatar (token arbitrario).",
    )
    require_type: bool | None = Field(
        default=False,
        alias="requireType",
        description="Fuerza la extensión `.jpg` en la ruta.",
    )
    size: int | None = Field(
        default=200,
        gt=0,
        description="Tamaño en píxeles.",
    )
    secure: bool | None = Field(
        default=None,
        description="True => https + host `secure.`; None => no se emite en la query.",
    )
    extras: dict[str, str] = Field(
        default_factory=dict,
        description="Opciones no reconocidas, reenviadas en orden de inserción.",
    )

    _order: list[str] = PrivateAttr(default_factory=list)
    _raw: dict[str, Any] = PrivateAttr(default_factory=dict)

    def model_post_init(self, __context: Any) -> None:
        for key in ("default", "requireType", "size"):
            self.note_key(key)
        if self.secure is not None:
            self.note_key("secure")
        for key in self.extras:
            self.note_key(key)

    def keys(self) -> list[str]:
        """Claves de la query en orden de inserción."""

        return list(self._order)

    def note_key(self, key: str) -> None:
        if key not in self._order:
            self._order.append(key)

    @property
    def raw_values(self) -> dict[str, Any]:
        """Valores rechazados por el tipo del campo, por clave de query."""

        return self._raw


class AvatarLink(BaseModel):
    """Resultado renderizado, pensado para salida JSON de la CLI."""

    email: str = Field(..., min_length=1, description="Email normalizado.")
    hash: str = Field(..., description="Digest usado en la ruta del avatar.")
    url: str = Field(..., description="URL final del avatar.")
    secure: bool = Field(default=False, description="Si la URL usa transporte cifrado.")
    options: dict[str, str] = Field(
        default_factory=dict,
        description="Pares clave/valor tal como aparecen en la query string.",
    )
