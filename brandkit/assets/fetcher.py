"""Asset fetchers: the byte-level transport used by the download orchestrator."""

from __future__ import annotations

from dataclasses import dataclass
from http.client import HTTPException
from typing import BinaryIO, Mapping, Optional, Protocol
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from ..errors import NetworkError

# CDNs in front of brand assets reject obvious non-browser clients.
BROWSER_HEADERS: Mapping[str, str] = {
    "User-Agent": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept": "image/svg+xml,image/webp,image/apng,image/*,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
}


@dataclass
class AssetResponse:
    """Status code plus a readable body; callers must :meth:`close` it.

    ``length`` is the announced ``Content-Length`` when the server sent one.
    """

    status: int
    body: BinaryIO
    length: Optional[int] = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def close(self) -> None:
        self.body.close()

    def __enter__(self) -> "AssetResponse":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.close()
        return False


class AssetFetcher(Protocol):
    def fetch(self, url: str, headers: Mapping[str, str]) -> AssetResponse:
        """Return the response for ``url`` or raise :class:`NetworkError` on transport failure."""
        ...


class HttpAssetFetcher:
    """Fetches assets over HTTP(S) with ``urllib``."""

    def __init__(self, *, timeout: float = 30.0) -> None:
        self.timeout = timeout

    def fetch(self, url: str, headers: Mapping[str, str]) -> AssetResponse:
        request = Request(url, headers=dict(headers), method="GET")
        try:
            response = urlopen(request, timeout=self.timeout)  # type: ignore[arg-type]
        except HTTPError as exc:
            # HTTPError doubles as the response object for non-2xx statuses.
            return AssetResponse(status=exc.code, body=exc)
        except URLError as exc:
            raise NetworkError(f"request failed: {exc.reason}") from exc
        except (HTTPException, OSError, ValueError) as exc:
            # getresponse() runs outside urllib's URLError wrapping.
            raise NetworkError(f"request failed: {exc!r}") from exc
        status = getattr(response, "status", None) or response.getcode() or 200
        return AssetResponse(
            status=int(status), body=response, length=_content_length(response)
        )


def _content_length(response) -> Optional[int]:
    headers = getattr(response, "headers", None)
    raw = headers.get("Content-Length") if headers is not None else None
    if raw is None:
        return None
    try:
        length = int(raw)
    except ValueError:
        return None
    return length if length >= 0 else None


__all__ = ["AssetFetcher", "AssetResponse", "BROWSER_HEADERS", "HttpAssetFetcher"]
