"""Typed views of Brand API responses."""

from __future__ import annotations

from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models import BrandAssetSet, ColorEntry, FontEntry


class _Payload(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @field_validator("*", mode="before")
    @classmethod
    def _null_to_default(cls, value, info):
        # The API sends explicit nulls for absent strings and lists.
        if value is None:
            field = cls.model_fields[info.field_name]
            return field.get_default(call_default_factory=True)
        return value


class LogoFormatPayload(_Payload):
    src: str = ""
    format: str = ""
    background: str = ""
    size: int = 0
    width: int = 0
    height: int = 0


class LogoPayload(_Payload):
    type: str = ""
    theme: str = ""
    formats: List[LogoFormatPayload] = Field(default_factory=list)


class ColorPayload(_Payload):
    hex: str = ""
    type: str = ""
    brightness: int = 0


class FontPayload(_Payload):
    name: str = ""
    type: str = ""
    origin: str = ""
    origin_id: str = Field(default="", alias="originId")


class BrandPayload(_Payload):
    id: str = ""
    name: str = ""
    domain: str = ""
    description: str = ""
    claimed: bool = False
    logos: List[LogoPayload] = Field(default_factory=list)
    colors: List[ColorPayload] = Field(default_factory=list)
    fonts: List[FontPayload] = Field(default_factory=list)

    def find_logos(self) -> Tuple[Optional[str], Optional[str], Optional[str]]:
        """Return ``(light_svg, dark_svg, favicon)`` URLs.

        The favicon is the first format of any ``icon`` entry; logos must be
        SVG formats of ``logo`` entries with a matching theme.
        """
        light: Optional[str] = None
        dark: Optional[str] = None
        favicon: Optional[str] = None
        for logo in self.logos:
            for fmt in logo.formats:
                if logo.type == "icon" and favicon is None and fmt.src:
                    favicon = fmt.src
                if fmt.format != "svg" or logo.type != "logo":
                    continue
                if logo.theme == "light" and light is None and fmt.src:
                    light = fmt.src
                if logo.theme == "dark" and dark is None and fmt.src:
                    dark = fmt.src
        return light, dark, favicon

    def to_asset_set(self) -> BrandAssetSet:
        light, dark, favicon = self.find_logos()
        return BrandAssetSet(
            name=self.name,
            domain=self.domain,
            logo_light=light,
            logo_dark=dark,
            favicon=favicon,
            colors=tuple(
                ColorEntry(hex=color.hex, type=color.type, brightness=color.brightness)
                for color in self.colors
            ),
            fonts=tuple(FontEntry(name=font.name, type=font.type) for font in self.fonts),
        )


__all__ = [
    "BrandPayload",
    "ColorPayload",
    "FontPayload",
    "LogoFormatPayload",
    "LogoPayload",
]
