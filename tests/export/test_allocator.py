"""Tests for collision-free variable naming."""

from __future__ import annotations

from brandkit.export.allocator import (
    allocate_names,
    color_variables,
    dedupe_fonts,
    font_variables,
    group_by_type,
    number_occurrences,
)
from brandkit.models import ColorEntry, FontEntry


def test_unique_types_have_no_suffix() -> None:
    pairs = [("accent", "#FF0000"), ("dark", "#000000"), ("light", "#FFFFFF")]

    names = [name for name, _ in allocate_names("--color", pairs)]

    assert names == ["--color-accent", "--color-dark", "--color-light"]


def test_repeated_type_is_numbered_in_arrival_order() -> None:
    pairs = [
        ("accent", "#FF0000"),
        ("light", "#FFFFFF"),
        ("accent", "#00FF00"),
        ("accent", "#0000FF"),
    ]

    allocated = allocate_names("--color", pairs)

    assert allocated == [
        ("--color-accent-1", "#FF0000"),
        ("--color-light", "#FFFFFF"),
        ("--color-accent-2", "#00FF00"),
        ("--color-accent-3", "#0000FF"),
    ]


def test_empty_input_yields_empty_output() -> None:
    assert allocate_names("--color", []) == []
    assert number_occurrences([]) == []


def test_semantic_type_is_not_sanitized() -> None:
    allocated = allocate_names("--color", [("accent ✦", "#123456")])

    assert allocated == [("--color-accent ✦", "#123456")]


def test_numbering_is_recomputed_per_call() -> None:
    pairs = [("accent", "#1"), ("accent", "#2")]

    first = allocate_names("--color", pairs)
    second = allocate_names("--color", pairs)

    assert first == second


def test_dedupe_fonts_keeps_first_occurrence() -> None:
    fonts = [
        FontEntry(name="Inter", type="body"),
        FontEntry(name="Inter", type="title"),
        FontEntry(name="Inter", type="body"),
    ]

    assert dedupe_fonts(fonts) == fonts[:2]


def test_font_numbering_counts_after_dedupe() -> None:
    fonts = [
        FontEntry(name="Inter", type="body"),
        FontEntry(name="Inter", type="body"),
        FontEntry(name="Lora", type="title"),
    ]

    variables = font_variables(fonts)

    assert [v.name for v in variables] == ["--font-body", "--font-title"]
    assert variables[0].value == "'Inter', sans-serif"


def test_appending_duplicate_font_does_not_change_names() -> None:
    fonts = [FontEntry(name="Inter", type="body"), FontEntry(name="Mono", type="body")]

    before = [v.name for v in font_variables(fonts)]
    after = [v.name for v in font_variables(fonts + [FontEntry(name="Mono", type="body")])]

    assert before == after == ["--font-body-1", "--font-body-2"]


def test_color_variables_use_prefix() -> None:
    colors = [ColorEntry(hex="#635BFF", type="accent")]

    variables = color_variables(colors, prefix="--stripe-color")

    assert [(v.name, v.value) for v in variables] == [("--stripe-color-accent", "#635BFF")]


def test_group_by_type_orders_by_first_occurrence() -> None:
    grouped = group_by_type([("dark", 1), ("accent", 2), ("dark", 3)])

    assert grouped == [("dark", [1, 3]), ("accent", [2])]
