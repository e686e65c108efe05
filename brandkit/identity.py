"""Namespace tokens derived from brand domains."""

from __future__ import annotations

# Stripped once each, in this order.
TLD_SUFFIXES = (".com", ".io", ".org", ".net", ".co")


def strip_tld(domain: str) -> str:
    name = domain
    for suffix in TLD_SUFFIXES:
        name = name.removesuffix(suffix)
    return name


def sanitize_dir_name(domain: str) -> str:
    """Directory name for a brand in batch downloads, e.g. ``stripe.com`` -> ``stripe``."""
    return strip_tld(domain).replace(".", "-")


__all__ = ["TLD_SUFFIXES", "sanitize_dir_name", "strip_tld"]
