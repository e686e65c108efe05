from __future__ import annotations

import io
from typing import Callable, Dict, List, Mapping, Sequence, Tuple

import pytest

from brandkit.assets.fetcher import AssetResponse
from brandkit.errors import BrandFetchError, NetworkError
from brandkit.models import BrandAssetSet, ColorEntry, FontEntry


class FakeBrandSource:
    """Brand source backed by a dict; unknown identifiers fail like a 404."""

    def __init__(self, brands: Mapping[str, BrandAssetSet]) -> None:
        self.brands = dict(brands)
        self.calls: List[str] = []

    def fetch_brand(self, identifier: str) -> BrandAssetSet:
        self.calls.append(identifier)
        if identifier not in self.brands:
            raise BrandFetchError("API error (404): Brand not found", status_code=404)
        return self.brands[identifier]


class FakeFetcher:
    """Asset fetcher serving canned ``(status, body[, length])`` tuples keyed by URL."""

    def __init__(self, responses: Mapping[str, tuple | Exception]) -> None:
        self.responses = dict(responses)
        self.calls: List[Tuple[str, Dict[str, str]]] = []

    def fetch(self, url: str, headers: Mapping[str, str]) -> AssetResponse:
        self.calls.append((url, dict(headers)))
        response = self.responses.get(url)
        if response is None:
            raise NetworkError(f"unexpected URL {url}")
        if isinstance(response, Exception):
            raise response
        status, body, *rest = response
        length = rest[0] if rest else None
        return AssetResponse(status=status, body=io.BytesIO(body), length=length)


def _make_brand(
    domain: str = "stripe.com",
    *,
    name: str | None = None,
    colors: Sequence[Tuple[str, str]] = (),
    fonts: Sequence[Tuple[str, str]] = (),
    logo_light: str | None = None,
    logo_dark: str | None = None,
    favicon: str | None = None,
) -> BrandAssetSet:
    """Build a brand from ``(type, hex)`` colors and ``(name, type)`` fonts."""
    return BrandAssetSet(
        name=name or domain.split(".")[0].title(),
        domain=domain,
        logo_light=logo_light,
        logo_dark=logo_dark,
        favicon=favicon,
        colors=tuple(ColorEntry(hex=hex_value, type=kind) for kind, hex_value in colors),
        fonts=tuple(FontEntry(name=font_name, type=kind) for font_name, kind in fonts),
    )


@pytest.fixture
def make_brand() -> Callable[..., BrandAssetSet]:
    return _make_brand


@pytest.fixture
def stripe_assets() -> BrandAssetSet:
    """Stripe with all three asset slots populated."""
    return _make_brand(
        "stripe.com",
        colors=[("accent", "#635BFF")],
        fonts=[("Sohne", "title")],
        logo_light="https://asset.brandfetch.io/stripe/logo-light.svg",
        logo_dark="https://asset.brandfetch.io/stripe/logo-dark.svg",
        favicon="https://asset.brandfetch.io/stripe/favicon.png",
    )


@pytest.fixture
def fake_source() -> Callable[[Mapping[str, BrandAssetSet]], FakeBrandSource]:
    return FakeBrandSource


@pytest.fixture
def fake_fetcher() -> Callable[..., FakeFetcher]:
    return FakeFetcher
