"""Core data models shared across brandkit components."""

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class ColorEntry:
    """A brand color in arrival order from the brand source."""

    hex: str
    type: str
    brightness: int = 0


@dataclass(frozen=True)
class FontEntry:
    """A brand font; ``(name, type)`` identifies duplicates."""

    name: str
    type: str

    @property
    def key(self) -> Tuple[str, str]:
        return (self.name, self.type)


@dataclass(frozen=True)
class BrandAssetSet:
    """Everything the export and download layers need for one identifier."""

    name: str
    domain: str
    logo_light: Optional[str] = None
    logo_dark: Optional[str] = None
    favicon: Optional[str] = None
    colors: Tuple[ColorEntry, ...] = field(default_factory=tuple)
    fonts: Tuple[FontEntry, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        payload: dict = {"name": self.name, "domain": self.domain}
        if self.logo_light:
            payload["logo_light"] = self.logo_light
        if self.logo_dark:
            payload["logo_dark"] = self.logo_dark
        if self.favicon:
            payload["favicon"] = self.favicon
        payload["colors"] = [
            {"hex": color.hex, "type": color.type, "brightness": color.brightness}
            for color in self.colors
        ]
        payload["fonts"] = [{"name": font.name, "type": font.type} for font in self.fonts]
        return payload


@dataclass(frozen=True)
class ChecksumEntry:
    """One manifest line: digest of a file keyed by its relative path."""

    path: str
    digest: str
