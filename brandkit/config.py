"""Configuration for brandkit: settings file, environment, and per-run export options."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .errors import ConfigError, ValidationError

APP_NAME = "brandkit"
CONFIG_FILENAME = "config.yml"
DEFAULT_BASE_URL = "https://api.brandfetch.io"
DEFAULT_LOGO_BASE_URL = "https://cdn.brandfetch.io"
DEFAULT_TIMEOUT = 30.0
OUTPUT_FORMATS = ("text", "json")

ENV_API_KEY = "BRANDFETCH_API_KEY"
ENV_CLIENT_ID = "BRANDFETCH_CLIENT_ID"
ENV_BASE_URL = "BRANDFETCH_BASE_URL"
ENV_OUTPUT = "BRANDKIT_OUTPUT"


@dataclass(frozen=True)
class Settings:
    """Credentials and HTTP settings resolved from the config file and environment."""

    api_key: Optional[str] = None
    client_id: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    logo_base_url: str = DEFAULT_LOGO_BASE_URL
    request_timeout: float = DEFAULT_TIMEOUT
    output: str = "text"
    source: Optional[Path] = None

    def require_api_key(self) -> str:
        if not self.api_key:
            raise ConfigError(
                f"missing Brand API key: set {ENV_API_KEY} or add api_key to {config_file_path()}"
            )
        return self.api_key

    def require_client_id(self) -> str:
        if not self.client_id:
            raise ConfigError(
                f"missing Logo API client ID: set {ENV_CLIENT_ID} or add client_id to {config_file_path()}"
            )
        return self.client_id


@dataclass(frozen=True)
class ExportOptions:
    """Flags for one ``quick`` invocation, validated before any network call."""

    output_format: str = "text"
    css: bool = False
    tailwind: bool = False
    download_dir: Optional[Path] = None
    sha256: bool = False
    manifest_path: Optional[Path] = None
    manifest_out: Optional[Path] = None
    manifest_append: bool = False
    manifest_strict: bool = False

    def validate(self) -> "ExportOptions":
        if self.output_format not in OUTPUT_FORMATS:
            raise ValidationError(
                f"invalid format: {self.output_format} (valid: {', '.join(OUTPUT_FORMATS)})"
            )
        if self.css and self.output_format == "json":
            raise ValidationError("--css and --output json are mutually exclusive")
        if self.tailwind and self.output_format == "json":
            raise ValidationError("--tailwind and --output json are mutually exclusive")
        if self.css and self.tailwind:
            raise ValidationError("--tailwind and --css are mutually exclusive")
        if self.download_dir is None:
            if self.manifest_path is not None:
                raise ValidationError("--sha256-manifest requires --download")
            if self.manifest_out is not None:
                raise ValidationError("--sha256-manifest-out requires --download")
            if self.sha256:
                raise ValidationError("--sha256 requires --download")
            if self.manifest_strict:
                raise ValidationError("--sha256-manifest-verify requires --download")
        if self.manifest_append and self.manifest_out is None:
            raise ValidationError("--sha256-manifest-append requires --sha256-manifest-out")
        if self.manifest_strict and self.manifest_path is None:
            raise ValidationError("--sha256-manifest-verify requires --sha256-manifest")
        return self


def config_dir(environ: Mapping[str, str] | None = None) -> Path:
    """Return ``$XDG_CONFIG_HOME/brandkit`` or ``~/.config/brandkit``."""
    env = os.environ if environ is None else environ
    config_home = env.get("XDG_CONFIG_HOME")
    base = Path(config_home) if config_home else Path.home() / ".config"
    return base / APP_NAME


def config_file_path(environ: Mapping[str, str] | None = None) -> Path:
    return config_dir(environ) / CONFIG_FILENAME


def load_settings(
    path: Path | None = None, *, environ: Mapping[str, str] | None = None
) -> Settings:
    """Load settings from disk, then apply environment overrides."""
    env = os.environ if environ is None else environ
    config_file = (path or config_file_path(env)).expanduser()

    data: Dict[str, Any] = {}
    source: Optional[Path] = None
    if config_file.is_file():
        data = _read_config(config_file)
        source = config_file

    api_key = _as_str(data.get("api_key"))
    client_id = _as_str(data.get("client_id"))
    base_url = _as_str(data.get("base_url")) or DEFAULT_BASE_URL
    logo_base_url = _as_str(data.get("logo_base_url")) or DEFAULT_LOGO_BASE_URL
    timeout = _as_float(data.get("request_timeout"))
    output = _as_str(data.get("output")) or "text"

    if env.get(ENV_API_KEY):
        api_key = env[ENV_API_KEY]
    if env.get(ENV_CLIENT_ID):
        client_id = env[ENV_CLIENT_ID]
    if env.get(ENV_BASE_URL):
        base_url = env[ENV_BASE_URL]
    if env.get(ENV_OUTPUT):
        output = env[ENV_OUTPUT]

    if timeout is not None and timeout <= 0:
        raise ConfigError(f"request_timeout must be positive in {config_file.name}")

    return Settings(
        api_key=api_key,
        client_id=client_id,
        base_url=base_url.rstrip("/"),
        logo_base_url=logo_base_url.rstrip("/"),
        request_timeout=timeout if timeout is not None else DEFAULT_TIMEOUT,
        output=output.lower(),
        source=source,
    )


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigError(f"{path.name} must contain a mapping at the root")
    return loaded


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return value.strip() or None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


__all__ = [
    "ExportOptions",
    "Settings",
    "config_dir",
    "config_file_path",
    "load_settings",
]
