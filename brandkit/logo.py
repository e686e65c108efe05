"""The ``logo download`` command: fetch one Logo API asset and optionally verify it."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Mapping, Optional, TextIO

from .api.logo import DEFAULT_LOGO_BASE_URL, LogoOptions, build_logo_url
from .assets import checksum
from .assets.download import extension_from_url, fetch_to_file
from .assets.fetcher import BROWSER_HEADERS, AssetFetcher
from .config import OUTPUT_FORMATS
from .errors import ChecksumMismatchError, NetworkError, ValidationError
from .logging import get_logger

DEFAULT_FILE_STEM = "logo"
DEFAULT_EXTENSION = "svg"


def sanitize_file_name(value: str) -> str:
    """Reduce an identifier to a single safe path component.

    Only the last path segment survives, so ``../../etc/passwd`` becomes
    ``passwd``; ``.``, ``..`` and empty values fall back to ``logo``.
    """
    name = PurePosixPath(value.strip()).name
    if name in ("", ".", ".."):
        return DEFAULT_FILE_STEM
    return name.replace(" ", "-").replace(":", "-")


def default_download_path(
    identifier: str, url: str, fmt: str = "", directory: Path | None = None
) -> Path:
    extension = extension_from_url(url).lstrip(".") or fmt or DEFAULT_EXTENSION
    filename = f"{sanitize_file_name(identifier)}.{extension}"
    return directory / filename if directory is not None else Path(filename)


@dataclass(frozen=True)
class LogoDownloadRequest:
    options: LogoOptions
    path: Optional[Path] = None
    directory: Optional[Path] = None
    sha256: Optional[str] = None
    output_format: str = "text"

    def validate(self) -> "LogoDownloadRequest":
        if self.path is not None and self.directory is not None:
            raise ValidationError("--path and --dir are mutually exclusive")
        if self.output_format not in OUTPUT_FORMATS:
            raise ValidationError(
                f"invalid format: {self.output_format} (valid: {', '.join(OUTPUT_FORMATS)})"
            )
        return self


@dataclass(frozen=True)
class LogoDownloadResult:
    url: str
    path: Path


class LogoDownloadCommand:
    def __init__(
        self,
        client_id: str,
        fetcher: AssetFetcher,
        *,
        base_url: str = DEFAULT_LOGO_BASE_URL,
        stdout: TextIO | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self.client_id = client_id
        self.fetcher = fetcher
        self.base_url = base_url
        self._stdout = stdout
        self.headers = dict(headers or BROWSER_HEADERS)
        self.logger = get_logger("logo")

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def run(self, request: LogoDownloadRequest) -> LogoDownloadResult:
        request.validate()
        options = request.options
        url = build_logo_url(self.client_id, options, base_url=self.base_url)
        dest = request.path or default_download_path(
            options.identifier, url, options.format, request.directory
        )

        dest.parent.mkdir(parents=True, exist_ok=True)
        self.logger.debug("Downloading %s to %s", url, dest)
        try:
            fetch_to_file(self.fetcher, url, dest, self.headers)
        except NetworkError as exc:
            raise NetworkError(f"failed to download logo: {exc}", status=exc.status) from exc

        if request.sha256 and not checksum.verify(dest, request.sha256):
            raise ChecksumMismatchError(
                f"sha256 mismatch for {dest}", path=str(dest), expected=request.sha256
            )

        if request.output_format == "json":
            print(json.dumps({"url": url, "path": str(dest)}, indent=2), file=self.stdout)
        else:
            print(dest, file=self.stdout)
        return LogoDownloadResult(url=url, path=dest)


__all__ = [
    "LogoDownloadCommand",
    "LogoDownloadRequest",
    "LogoDownloadResult",
    "default_download_path",
    "sanitize_file_name",
]
