"""Exportación JSON de enlaces de avatar.

Por qué JSON:
- Interoperabilidad con otras herramientas y pipelines.
- Permite guardar el enlace junto a su hash y opciones sin re-renderizar.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path

from core.domain.models import AvatarLink


def dump_links_json(links: Iterable[AvatarLink]) -> str:
    """Serializa enlaces a JSON UTF-8 con formato estable."""

    payload = [link.model_dump(mode="json") for link in links]
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n"


def export_links_json(*, links: Iterable[AvatarLink], output_path: Path) -> Path:
    """Exporta enlaces a un fichero JSON (crea directorios intermedios)."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(dump_links_json(links), encoding="utf-8")
    return output_path
