"""Plain text and JSON rendering of brand asset sets."""

from __future__ import annotations

import json
from typing import List, Sequence

from .models import BrandAssetSet


def colorize_hex(hex_value: str, enabled: bool) -> str:
    """Wrap a ``#RRGGBB`` value in a 24-bit ANSI color escape when enabled."""
    if not enabled or len(hex_value) != 7 or not hex_value.startswith("#"):
        return hex_value
    try:
        red, green, blue = (int(hex_value[i : i + 2], 16) for i in (1, 3, 5))
    except ValueError:
        return hex_value
    return f"\x1b[38;2;{red};{green};{blue}m{hex_value}\x1b[0m"


def format_text(brand: BrandAssetSet, *, colorize: bool = False) -> str:
    lines: List[str] = [f"{brand.name} ({brand.domain})", "", "Logos (SVG):"]
    if brand.logo_light:
        lines.append(f"  light: {brand.logo_light}")
    if brand.logo_dark:
        lines.append(f"  dark:  {brand.logo_dark}")
    if not brand.logo_light and not brand.logo_dark:
        lines.append("  (no SVG available)")

    if brand.favicon:
        lines.extend(["", "Favicon:", f"  {brand.favicon}"])

    if brand.colors:
        lines.extend(["", "Colors:"])
        for color in brand.colors:
            lines.append(f"  {colorize_hex(color.hex, colorize)} ({color.type})")

    if brand.fonts:
        lines.extend(["", "Fonts:"])
        for font in brand.fonts:
            lines.append(f"  {font.name} ({font.type})")

    return "\n".join(lines) + "\n"


def format_json(brands: Sequence[BrandAssetSet]) -> str:
    """Render one brand as an object and several as an array."""
    if len(brands) == 1:
        return json.dumps(brands[0].to_dict(), indent=2)
    return json.dumps([brand.to_dict() for brand in brands], indent=2)


def format_text_batch(brands: Sequence[BrandAssetSet], *, colorize: bool = False) -> str:
    return "\n".join(format_text(brand, colorize=colorize) for brand in brands)


__all__ = ["colorize_hex", "format_json", "format_text", "format_text_batch"]
