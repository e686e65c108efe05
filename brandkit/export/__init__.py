"""Render brand colors and fonts as CSS variables or Tailwind config."""

from .allocator import Variable, allocate_names, color_variables, dedupe_fonts, font_variables
from .css import format_css, format_css_batch, sanitize_css_name
from .tailwind import format_tailwind, format_tailwind_batch, sanitize_tailwind_key

__all__ = [
    "Variable",
    "allocate_names",
    "color_variables",
    "dedupe_fonts",
    "font_variables",
    "format_css",
    "format_css_batch",
    "format_tailwind",
    "format_tailwind_batch",
    "sanitize_css_name",
    "sanitize_tailwind_key",
]
