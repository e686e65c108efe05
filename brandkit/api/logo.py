"""Logo API CDN URLs.

The Logo API needs no request of its own: the CDN path encodes the identifier
and the rendering options, and the client ID travels as the ``c`` query
parameter.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List
from urllib.parse import quote, urlencode

from ..errors import ConfigError, ValidationError
from .client import normalize_identifier

DEFAULT_LOGO_BASE_URL = "https://cdn.brandfetch.io"
LOGO_FORMATS = ("svg", "png", "webp")
LOGO_THEMES = ("light", "dark")
LOGO_TYPES = ("logo", "icon", "symbol")
LOGO_FALLBACKS = ("lettermark", "icon", "symbol", "brandfetch", "404")


@dataclass(frozen=True)
class LogoOptions:
    identifier: str
    theme: str = "light"
    type: str = "logo"
    format: str = "svg"
    fallback: str = ""
    width: int = 0
    height: int = 0


def build_logo_url(
    client_id: str, options: LogoOptions, *, base_url: str = DEFAULT_LOGO_BASE_URL
) -> str:
    """Return e.g. ``https://cdn.brandfetch.io/github.com/theme/light/type/logo.svg?c=<id>``."""
    identifier = normalize_identifier(options.identifier)
    if not identifier:
        raise ValidationError("identifier is required")
    if not client_id or not client_id.strip():
        raise ConfigError("client ID is required for Logo API")

    segments: List[str] = []
    if options.width > 0:
        segments += ["w", str(options.width)]
    if options.height > 0:
        segments += ["h", str(options.height)]
    if options.theme:
        segments += ["theme", options.theme]
    if options.fallback:
        segments += ["fallback", options.fallback]

    # A bare format implies the icon type.
    type_segment = options.type or ("icon" if options.format else "")
    if type_segment:
        if options.format:
            type_segment = f"{type_segment}.{options.format}"
        segments += ["type", type_segment]

    url = f"{base_url.rstrip('/')}/{quote(identifier, safe='')}"
    if segments:
        url = f"{url}/{'/'.join(segments)}"
    return f"{url}?{urlencode({'c': client_id})}"


__all__ = [
    "DEFAULT_LOGO_BASE_URL",
    "LOGO_FALLBACKS",
    "LOGO_FORMATS",
    "LOGO_THEMES",
    "LOGO_TYPES",
    "LogoOptions",
    "build_logo_url",
]
