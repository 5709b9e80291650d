"""Contrato de fuentes de enlaces de avatar.

Por qué Protocol:
- La CLI y los exportadores solo necesitan "algo que renderice un enlace";
  no dependen de `AvatarLinkBuilder` directamente.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from core.domain.models import AvatarLink


@runtime_checkable
class AvatarLinkSource(Protocol):
    """Contrato mínimo para producir un enlace de avatar.

    Reglas de diseño:
    - `get_avatar` es síncrono: no hay I/O, solo formateo.
    - Los overrides afectan solo a la llamada en curso.
    """

    def get_email(self) -> str:
        ...

    def get_avatar(self, overrides: Any = None) -> str:
        """Devuelve la URL del avatar con `overrides` aplicados a esta llamada."""

        ...

    def to_link(self, overrides: Any = None) -> AvatarLink:
        ...
