"""Errores del dominio.

Por qué un módulo propio:
- Los servicios y la CLI comparten el mismo tipo de error sin importarse
  entre sí.
"""

from __future__ import annotations


class InvalidInputError(ValueError):
    """Entrada inválida: email ausente, vacío o que no es texto."""
