"""CSS custom-property emitter for brand colors and fonts."""

from __future__ import annotations

from typing import List, Sequence

from ..identity import strip_tld
from ..models import BrandAssetSet
from .allocator import color_variables, font_variables

_OPEN = ":root {"
_CLOSE = "}"


def sanitize_css_name(domain: str) -> str:
    """Convert a domain to a custom-property namespace, e.g. ``api.stripe.com`` -> ``api-stripe``."""
    return strip_tld(domain).replace(".", "-")


def format_css(brand: BrandAssetSet) -> str:
    """Render one brand as an unnamespaced ``:root`` block."""
    lines: List[str] = [_OPEN]

    if brand.colors:
        lines.append("  /* Colors */")
        for variable in color_variables(brand.colors):
            lines.append(f"  {variable.name}: {variable.value};")

    if brand.fonts:
        if brand.colors:
            lines.append("")
        lines.append("  /* Fonts */")
        for variable in font_variables(brand.fonts):
            lines.append(f"  {variable.name}: {variable.value};")

    lines.append(_CLOSE)
    return "\n".join(lines)


def format_css_batch(brands: Sequence[BrandAssetSet]) -> str:
    """Render several brands into one ``:root`` block with per-brand namespaces.

    A single brand renders exactly like :func:`format_css`.
    """
    if not brands:
        return f"{_OPEN}\n{_CLOSE}"
    if len(brands) == 1:
        return format_css(brands[0])

    lines: List[str] = [_OPEN]
    for index, brand in enumerate(brands):
        if index > 0:
            lines.append("")
        namespace = sanitize_css_name(brand.domain)
        lines.append(f"  /* {brand.name} */")
        for variable in color_variables(brand.colors, prefix=f"--{namespace}-color"):
            lines.append(f"  {variable.name}: {variable.value};")
        for variable in font_variables(brand.fonts, prefix=f"--{namespace}-font"):
            lines.append(f"  {variable.name}: {variable.value};")
    lines.append(_CLOSE)
    return "\n".join(lines)


__all__ = ["format_css", "format_css_batch", "sanitize_css_name"]
