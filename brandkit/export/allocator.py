"""Stable, collision-free variable naming for typed brand values.

Names are derived fresh on every call from arrival order. A semantic type that
occurs once is named ``<prefix>-<type>``; a type that occurs ``k > 1`` times is
named ``<prefix>-<type>-1`` .. ``<prefix>-<type>-k`` in arrival order. Types
never interact with each other.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple, TypeVar

from ..models import ColorEntry, FontEntry

T = TypeVar("T")


@dataclass(frozen=True)
class Variable:
    """A named value ready for rendering."""

    name: str
    value: str


def number_occurrences(types: Sequence[str]) -> List[Optional[int]]:
    """Return the 1-based running index of each type, or ``None`` for singletons."""
    counts = Counter(types)
    running: Counter[str] = Counter()
    indices: List[Optional[int]] = []
    for semantic_type in types:
        if counts[semantic_type] > 1:
            running[semantic_type] += 1
            indices.append(running[semantic_type])
        else:
            indices.append(None)
    return indices


def allocate_names(
    prefix: str, items: Sequence[Tuple[str, T]]
) -> List[Tuple[str, T]]:
    """Assign ``prefix``-scoped names to ``(type, payload)`` pairs, preserving order."""
    indices = number_occurrences([semantic_type for semantic_type, _ in items])
    allocated: List[Tuple[str, T]] = []
    for (semantic_type, payload), index in zip(items, indices):
        name = f"{prefix}-{semantic_type}"
        if index is not None:
            name = f"{name}-{index}"
        allocated.append((name, payload))
    return allocated


def dedupe_fonts(fonts: Iterable[FontEntry]) -> List[FontEntry]:
    """Drop later fonts that repeat an earlier ``(name, type)`` pair."""
    seen: set[Tuple[str, str]] = set()
    unique: List[FontEntry] = []
    for font in fonts:
        if font.key in seen:
            continue
        seen.add(font.key)
        unique.append(font)
    return unique


def group_by_type(items: Sequence[Tuple[str, T]]) -> List[Tuple[str, List[T]]]:
    """Group payloads by type, ordered by each type's first occurrence."""
    groups: dict[str, List[T]] = {}
    for semantic_type, payload in items:
        groups.setdefault(semantic_type, []).append(payload)
    return list(groups.items())


def color_variables(colors: Sequence[ColorEntry], prefix: str = "--color") -> List[Variable]:
    pairs = [(color.type, color.hex) for color in colors]
    return [Variable(name=name, value=value) for name, value in allocate_names(prefix, pairs)]


def font_variables(fonts: Sequence[FontEntry], prefix: str = "--font") -> List[Variable]:
    pairs = [(font.type, font.name) for font in dedupe_fonts(fonts)]
    return [
        Variable(name=name, value=f"'{font_name}', sans-serif")
        for name, font_name in allocate_names(prefix, pairs)
    ]


__all__ = [
    "Variable",
    "allocate_names",
    "color_variables",
    "dedupe_fonts",
    "font_variables",
    "group_by_type",
    "number_occurrences",
]
