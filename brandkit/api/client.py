"""Brand API client used as the brand source for exports and downloads."""

from __future__ import annotations

import json
from typing import Protocol
from urllib.error import HTTPError, URLError
from urllib.parse import quote
from urllib.request import Request, urlopen

from pydantic import ValidationError as PayloadValidationError

from ..errors import BrandFetchError
from ..logging import get_logger
from ..models import BrandAssetSet
from .payloads import BrandPayload

DEFAULT_BASE_URL = "https://api.brandfetch.io"
DEFAULT_TIMEOUT = 30.0

_STATUS_MESSAGES = {
    401: "Invalid API key. Set BRANDFETCH_API_KEY or add api_key to the brandkit config file.",
    404: "Brand not found",
    429: "Rate limit exceeded. Try again later.",
}


class BrandSource(Protocol):
    def fetch_brand(self, identifier: str) -> BrandAssetSet:
        """Return the asset set for ``identifier`` or raise."""
        ...


def normalize_domain(domain: str) -> str:
    domain = domain.lower()
    domain = domain.removeprefix("https://").removeprefix("http://").removeprefix("www.")
    return domain.removesuffix("/")


def normalize_identifier(identifier: str) -> str:
    """Normalise domains and URLs while leaving brand IDs, URNs, and tickers alone."""
    trimmed = identifier.strip()
    if not trimmed:
        return trimmed
    lowered = trimmed.lower()
    if lowered.startswith(("id_", "urn:")):
        return trimmed
    if "://" in lowered or lowered.startswith("www.") or "." in trimmed:
        return normalize_domain(trimmed)
    return trimmed


def api_error(status: int, body: str) -> BrandFetchError:
    message = _STATUS_MESSAGES.get(status) or body.strip() or f"HTTP {status}"
    return BrandFetchError(f"API error ({status}): {message}", status_code=status)


class BrandfetchClient:
    """Fetches brand records from the Brand API over HTTPS."""

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        request_timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.request_timeout = request_timeout
        self.logger = get_logger("api")

    def fetch_brand(self, identifier: str) -> BrandAssetSet:
        return self.get_brand(identifier).to_asset_set()

    def get_brand(self, identifier: str) -> BrandPayload:
        normalized = normalize_identifier(identifier)
        if not normalized:
            raise BrandFetchError("identifier is required")
        endpoint = f"{self.base_url}/v2/brands/{quote(normalized, safe='')}"
        request = Request(
            endpoint,
            headers={
                "Authorization": f"Bearer {self.api_key}",
                "Accept": "application/json",
            },
            method="GET",
        )
        self.logger.debug("GET %s", endpoint)

        try:
            with urlopen(request, timeout=self.request_timeout) as response:  # type: ignore[arg-type]
                raw = response.read()
        except HTTPError as exc:
            detail = exc.read().decode("utf-8", errors="ignore") if hasattr(exc, "read") else ""
            raise api_error(exc.code, detail) from exc
        except URLError as exc:
            raise BrandFetchError(f"connection failed: {exc.reason}") from exc

        try:
            payload = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise BrandFetchError("failed to parse response: invalid JSON") from exc

        try:
            return BrandPayload.model_validate(payload)
        except PayloadValidationError as exc:
            raise BrandFetchError(f"failed to parse response: {exc}") from exc


__all__ = [
    "BrandSource",
    "BrandfetchClient",
    "DEFAULT_BASE_URL",
    "api_error",
    "normalize_domain",
    "normalize_identifier",
]
