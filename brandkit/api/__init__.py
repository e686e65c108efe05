"""Brand API and Logo API access."""

from .client import BrandSource, BrandfetchClient, normalize_identifier
from .logo import LogoOptions, build_logo_url
from .payloads import BrandPayload

__all__ = [
    "BrandPayload",
    "BrandSource",
    "BrandfetchClient",
    "LogoOptions",
    "build_logo_url",
    "normalize_identifier",
]
