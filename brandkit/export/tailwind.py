"""Tailwind ``theme.extend`` config emitter for brand colors and fonts.

Repeated color types become nested objects keyed ``1..k``; repeated font types
become sibling keys ``<type>1..<type>k`` after duplicate fonts are dropped.
"""

from __future__ import annotations

from typing import List, Sequence

from ..identity import strip_tld
from ..models import BrandAssetSet, ColorEntry, FontEntry
from .allocator import dedupe_fonts, group_by_type, number_occurrences

_HEADER_HINT = "// Add to your tailwind.config.js theme.extend"


def sanitize_tailwind_key(domain: str) -> str:
    """Convert a domain to an object key, e.g. ``my-brand.co.uk`` -> ``my_brand_co_uk``."""
    return strip_tld(domain).replace(".", "_").replace("-", "_")


def color_entries(colors: Sequence[ColorEntry], indent: str = "    ") -> List[str]:
    lines: List[str] = []
    grouped = group_by_type([(color.type, color.hex) for color in colors])
    for color_type, hex_values in grouped:
        if len(hex_values) == 1:
            lines.append(f"{indent}{color_type}: '{hex_values[0]}',")
            continue
        lines.append(f"{indent}{color_type}: {{")
        for position, hex_value in enumerate(hex_values, start=1):
            lines.append(f"{indent}  {position}: '{hex_value}',")
        lines.append(f"{indent}}},")
    return lines


def font_entries(fonts: Sequence[FontEntry], indent: str = "    ") -> List[str]:
    unique = dedupe_fonts(fonts)
    indices = number_occurrences([font.type for font in unique])
    lines: List[str] = []
    for font, index in zip(unique, indices):
        key = font.type if index is None else f"{font.type}{index}"
        lines.append(f"{indent}{key}: ['\"{font.name}\"', 'sans-serif'],")
    return lines


def format_tailwind(brand: BrandAssetSet) -> str:
    """Render one brand as a ``module.exports`` config."""
    lines: List[str] = [
        f"// Tailwind CSS config for {brand.name}",
        _HEADER_HINT,
        "module.exports = {",
    ]
    if brand.colors:
        lines.append("  colors: {")
        lines.extend(color_entries(brand.colors))
        lines.append("  },")
    if brand.fonts:
        lines.append("  fontFamily: {")
        lines.extend(font_entries(brand.fonts))
        lines.append("  },")
    lines.append("}")
    return "\n".join(lines)


def format_tailwind_batch(brands: Sequence[BrandAssetSet]) -> str:
    """Render several brands with one nested object per brand in each section."""
    if not brands:
        return "module.exports = {\n}"
    if len(brands) == 1:
        return format_tailwind(brands[0])

    lines: List[str] = [
        "// Tailwind CSS config for multiple brands",
        _HEADER_HINT,
        "module.exports = {",
    ]

    with_colors = [brand for brand in brands if brand.colors]
    if with_colors:
        lines.append("  colors: {")
        for brand in with_colors:
            lines.append(f"    {sanitize_tailwind_key(brand.domain)}: {{")
            lines.extend(color_entries(brand.colors, indent="      "))
            lines.append("    },")
        lines.append("  },")

    with_fonts = [brand for brand in brands if brand.fonts]
    if with_fonts:
        lines.append("  fontFamily: {")
        for brand in with_fonts:
            lines.append(f"    {sanitize_tailwind_key(brand.domain)}: {{")
            lines.extend(font_entries(brand.fonts, indent="      "))
            lines.append("    },")
        lines.append("  },")

    lines.append("}")
    return "\n".join(lines)


__all__ = [
    "color_entries",
    "font_entries",
    "format_tailwind",
    "format_tailwind_batch",
    "sanitize_tailwind_key",
]
