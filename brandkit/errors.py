"""Error taxonomy shared by the export, checksum, and download layers.

File-system failures are not wrapped: ``OSError`` propagates as-is from the
checksum engine and the download orchestrator.
"""

from __future__ import annotations


class BrandkitError(RuntimeError):
    """Base class for brandkit failures that map to a non-zero exit."""


class ConfigError(BrandkitError):
    """Raised when the settings file cannot be parsed or credentials are missing."""


class ValidationError(BrandkitError, ValueError):
    """Raised for invalid flag combinations or an empty manifest write."""


class NetworkError(BrandkitError):
    """Raised when an asset fetch fails in transport or returns a non-2xx status."""

    def __init__(self, message: str, *, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class BrandFetchError(BrandkitError):
    """Raised when the Brand API rejects or cannot serve an identifier."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ChecksumMismatchError(BrandkitError):
    """Raised when a computed digest differs from the expected one."""

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        expected: str | None = None,
        actual: str | None = None,
    ) -> None:
        super().__init__(message)
        self.path = path
        self.expected = expected
        self.actual = actual


class MissingManifestEntryError(ChecksumMismatchError):
    """Raised when a manifest holds no entry for a file's relative path or base name."""


__all__ = [
    "BrandFetchError",
    "BrandkitError",
    "ChecksumMismatchError",
    "ConfigError",
    "MissingManifestEntryError",
    "NetworkError",
    "ValidationError",
]
