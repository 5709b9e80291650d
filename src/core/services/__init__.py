"""Servicios del Core: normalización, opciones y construcción de enlaces."""

from core.services.avatar_link import AvatarLinkBuilder, build_avatar_url
from core.services.identity import build_identity, email_hash, normalize_email
from core.services.options import merge_options

__all__ = [
	"AvatarLinkBuilder",
	"build_avatar_url",
	"build_identity",
	"email_hash",
	"merge_options",
	"normalize_email",
]
