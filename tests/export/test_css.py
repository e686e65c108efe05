"""Tests for the CSS custom-property emitter."""

from __future__ import annotations

from brandkit.export.css import format_css, format_css_batch, sanitize_css_name


def test_format_css_numbers_duplicate_colors(make_brand) -> None:
    brand = make_brand(
        colors=[("accent", "#FF0000"), ("accent", "#00FF00"), ("light", "#FFFFFF")]
    )

    rendered = format_css(brand)

    assert "  --color-accent-1: #FF0000;" in rendered
    assert "  --color-accent-2: #00FF00;" in rendered
    assert "  --color-light: #FFFFFF;" in rendered


def test_format_css_full_layout(make_brand) -> None:
    brand = make_brand(colors=[("dark", "#24292f")], fonts=[("Mona Sans", "title")])

    assert format_css(brand) == (
        ":root {\n"
        "  /* Colors */\n"
        "  --color-dark: #24292f;\n"
        "\n"
        "  /* Fonts */\n"
        "  --font-title: 'Mona Sans', sans-serif;\n"
        "}"
    )


def test_format_css_fonts_only_has_no_blank_line(make_brand) -> None:
    brand = make_brand(fonts=[("Inter", "body")])

    assert format_css(brand) == (
        ":root {\n  /* Fonts */\n  --font-body: 'Inter', sans-serif;\n}"
    )


def test_format_css_empty_brand_keeps_block(make_brand) -> None:
    assert format_css(make_brand()) == ":root {\n}"


def test_format_css_renders_malformed_values_verbatim(make_brand) -> None:
    brand = make_brand(colors=[("accent", "")], fonts=[("", "body")])

    rendered = format_css(brand)

    assert "  --color-accent: ;" in rendered
    assert "  --font-body: '', sans-serif;" in rendered


def test_batch_with_zero_brands_is_empty_block() -> None:
    assert format_css_batch([]) == ":root {\n}"


def test_batch_with_one_brand_matches_single(make_brand) -> None:
    brand = make_brand(colors=[("accent", "#635BFF")], fonts=[("Sohne", "title")])

    assert format_css_batch([brand]) == format_css(brand)


def test_batch_prefixes_each_brand(make_brand) -> None:
    stripe = make_brand("stripe.com", name="Stripe", colors=[("accent", "#635BFF")])
    github = make_brand("github.com", name="GitHub", colors=[("dark", "#24292f")])

    rendered = format_css_batch([stripe, github])

    assert rendered == (
        ":root {\n"
        "  /* Stripe */\n"
        "  --stripe-color-accent: #635BFF;\n"
        "\n"
        "  /* GitHub */\n"
        "  --github-color-dark: #24292f;\n"
        "}"
    )


def test_batch_numbering_is_per_brand(make_brand) -> None:
    first = make_brand("a.com", colors=[("accent", "#1"), ("accent", "#2")])
    second = make_brand("b.com", colors=[("accent", "#3")], fonts=[("Inter", "body")])

    rendered = format_css_batch([first, second])

    assert "--a-color-accent-1: #1;" in rendered
    assert "--a-color-accent-2: #2;" in rendered
    assert "--b-color-accent: #3;" in rendered
    assert "--b-font-body: 'Inter', sans-serif;" in rendered


def test_sanitize_css_name() -> None:
    assert sanitize_css_name("stripe.com") == "stripe"
    assert sanitize_css_name("api.github.io") == "api-github"
    assert sanitize_css_name("example.co.uk") == "example-co-uk"
    assert sanitize_css_name("brand.co") == "brand"
