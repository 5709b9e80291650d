"""Normalización de email y hash público.

Implementación:
- Normaliza el email (strip + lower).
- Calcula MD5 del email normalizado (convención del servicio de avatares).
"""

from __future__ import annotations

import hashlib
from typing import Any

from core.domain.errors import InvalidInputError
from core.domain.models import Identity


def normalize_email(email: Any) -> str:
    if not isinstance(email, str):
        raise InvalidInputError(f"email must be a string, got {type(email).__name__}")
    normalized = email.strip().lower()
    if not normalized:
        raise InvalidInputError("email must not be empty")
    return normalized


def email_hash(normalized_email: str) -> str:
    return hashlib.md5(normalized_email.encode("utf-8")).hexdigest()  # nosec - hash público


def build_identity(email: Any) -> Identity:
    """Normaliza y hashea en un solo paso: el hash siempre corresponde al email."""

    normalized = normalize_email(email)
    return Identity(email=normalized, hash=email_hash(normalized))
