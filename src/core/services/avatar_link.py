"""Construcción de enlaces de avatar a partir de un email.

This module holds `AvatarLinkBuilder`, the single stateful component of the
package. It owns a normalized identity (email + MD5 hash) and a set of
default display options, and renders avatar URLs on demand.

Rendering is call-scoped: options passed to `get_avatar` are merged into a
copy of the stored defaults, so a one-off override (e.g. `secure=True`) never
leaks into later calls. Only the explicit setters change stored state. The
setters are not synchronized; share a builder across threads only for reads.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from core.config import AppSettings
from core.domain.models import AvatarLink, AvatarOptions, Identity
from core.logging_config import get_logger
from core.services.identity import build_identity
from core.services.options import (
    apply_option,
    default_options,
    explicit_items,
    merge_options,
    query_pairs,
    render_query,
)

logger = get_logger(__name__)

AVATAR_PATH = "avatar/1"
IMAGE_EXTENSION = ".jpg"


class AvatarLinkBuilder:
    """Builds avatar URLs for one email address.

    >>> builder = AvatarLinkBuilder("Test@Example.com ")
    >>> builder.get_avatar()
    'http://www.gravatar.com/avatar/1/55502f40dc8b7c769880b10874abc9d0?default=404&requireType=false&size=200'
    """

    def __init__(
        self,
        email: Any,
        options: Mapping[str, Any] | AvatarOptions | None = None,
        *,
        settings: AppSettings | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._identity: Identity = build_identity(email)
        self._options = merge_options(default_options(self._settings), options)

    @property
    def identity(self) -> Identity:
        return self._identity

    @property
    def hash(self) -> str:
        return self._identity.hash

    def get_email(self) -> str:
        return self._identity.email

    def set_email(self, email: Any) -> None:
        """Replace the email; the hash is recomputed in the same step."""

        self._identity = build_identity(email)
        logger.debug("Email updated, hash=%s", self._identity.hash)

    def get_options(self) -> AvatarOptions:
        """Return the live options record (later setter calls are visible through it)."""

        return self._options

    def set_option(self, name: str, value: Any) -> None:
        """Set a single option. Non-string names are silently ignored."""

        apply_option(self._options, name, value)

    def set_options(self, options: Mapping[str, Any] | AvatarOptions) -> None:
        """Bulk merge, applying each key through `set_option`.

        Anything other than a mapping or `AvatarOptions` is silently ignored.
        """

        if isinstance(options, AvatarOptions):
            options = dict(explicit_items(options))
        if isinstance(options, Mapping):
            for key, value in options.items():
                self.set_option(key, value)
        else:
            logger.debug("Ignoring options of type %s", type(options).__name__)

    def _host(self, options: AvatarOptions) -> str:
        domain = self._settings.service_domain
        if options.secure is True:
            return f"https://secure.{domain}/"
        return f"http://www.{domain}/"

    def _render(self, options: AvatarOptions) -> str:
        path = f"{self._host(options)}{AVATAR_PATH}/{self._identity.hash}"
        if options.require_type is True:
            path += IMAGE_EXTENSION
        return f"{path}?{render_query(options)}"

    def get_avatar(self, overrides: Any = None) -> str:
        """Render the avatar URL, with `overrides` applied to this call only."""

        options = merge_options(self._options, overrides)
        url = self._render(options)
        logger.debug("Rendered avatar link %s", url)
        return url

    def to_link(self, overrides: Any = None) -> AvatarLink:
        options = merge_options(self._options, overrides)
        return AvatarLink(
            email=self._identity.email,
            hash=self._identity.hash,
            url=self._render(options),
            secure=options.secure is True,
            options=dict(query_pairs(options)),
        )


def build_avatar_url(email: Any, settings: AppSettings | None = None, **options: Any) -> str:
    """One-shot helper: `build_avatar_url("a@b.c", size=80, secure=True)`."""

    return AvatarLinkBuilder(email, options, settings=settings).get_avatar()
