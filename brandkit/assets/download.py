"""Sequential, partial-failure-tolerant download of brand logo assets."""

from __future__ import annotations

import shutil
import sys
from dataclasses import dataclass, field
from enum import Enum
from http.client import HTTPException
from pathlib import Path, PurePosixPath
from typing import List, Mapping, Optional, Sequence, TextIO
from urllib.parse import urlparse

from ..errors import ChecksumMismatchError, NetworkError
from ..identity import sanitize_dir_name
from ..logging import get_logger
from ..models import BrandAssetSet, ChecksumEntry
from . import checksum
from .fetcher import BROWSER_HEADERS, AssetFetcher, AssetResponse

LOGO_LIGHT_FILENAME = "logo-light.svg"
LOGO_DARK_FILENAME = "logo-dark.svg"
FAVICON_STEM = "favicon"


class DownloadStatus(str, Enum):
    DONE = "done"
    PARTIAL_FAILURE = "partial_failure"
    TOTAL_FAILURE = "total_failure"


@dataclass(frozen=True)
class PlannedAsset:
    """One asset slot with a URL to fetch and a fixed destination file name."""

    url: str
    filename: str


@dataclass(frozen=True)
class AssetFailure:
    path: Path
    reason: str


@dataclass
class DownloadReport:
    """Accumulated outcome of a download batch."""

    downloaded: List[Path] = field(default_factory=list)
    failures: List[AssetFailure] = field(default_factory=list)
    checksum_failures: List[AssetFailure] = field(default_factory=list)
    checksum_entries: List[ChecksumEntry] = field(default_factory=list)

    @property
    def status(self) -> DownloadStatus:
        if not self.failures:
            return DownloadStatus.DONE
        if self.downloaded:
            return DownloadStatus.PARTIAL_FAILURE
        return DownloadStatus.TOTAL_FAILURE


@dataclass(frozen=True)
class DownloadPolicy:
    """Per-asset checksum behaviour for a download batch."""

    write_sidecar: bool = False
    manifest: Optional[Mapping[str, str]] = None
    strict: bool = False
    collect_checksums: bool = False


def extension_from_url(url: str) -> str:
    """Return the lower-cased suffix of the URL path (``".png"``), or ``""``."""
    try:
        path = urlparse(url).path
    except ValueError:
        return ""
    # A trailing dot ("/icon.") yields no suffix, so no bare "favicon." file.
    return PurePosixPath(path).suffix.lower()


def save_response(response: AssetResponse, dest: Path) -> int:
    """Stream a successful ``response`` into ``dest`` and return the bytes written.

    A body shorter than its announced length, or one that breaks mid-read, raises
    :class:`NetworkError`; ``dest`` is removed whenever the copy does not finish.
    """
    try:
        with dest.open("wb") as handle:
            try:
                shutil.copyfileobj(response.body, handle)
            except HTTPException as exc:
                raise NetworkError(f"read failed: {exc!r}") from exc
            written = handle.tell()
        if response.length is not None and written < response.length:
            raise NetworkError(
                f"unexpected EOF: received {written} of {response.length} bytes"
            )
    except (NetworkError, OSError):
        dest.unlink(missing_ok=True)
        raise
    return written


def fetch_to_file(
    fetcher: AssetFetcher, url: str, dest: Path, headers: Mapping[str, str]
) -> int:
    """Fetch ``url`` into ``dest``; non-2xx statuses raise :class:`NetworkError`."""
    response = fetcher.fetch(url, headers)
    with response:
        if not response.ok:
            raise NetworkError(f"HTTP {response.status}", status=response.status)
        return save_response(response, dest)


def plan_assets(brand: BrandAssetSet) -> List[PlannedAsset]:
    planned: List[PlannedAsset] = []
    if brand.logo_light:
        planned.append(PlannedAsset(url=brand.logo_light, filename=LOGO_LIGHT_FILENAME))
    if brand.logo_dark:
        planned.append(PlannedAsset(url=brand.logo_dark, filename=LOGO_DARK_FILENAME))
    if brand.favicon:
        filename = FAVICON_STEM + extension_from_url(brand.favicon)
        planned.append(PlannedAsset(url=brand.favicon, filename=filename))
    return planned


def target_directory(root: Path, brand: BrandAssetSet, batch_size: int) -> Path:
    if batch_size > 1:
        return root / sanitize_dir_name(brand.domain)
    return root


class DownloadOrchestrator:
    """Downloads logos and favicons for a batch of brands, one asset at a time.

    Fetch failures, including bodies cut short of their ``Content-Length``, are
    recorded and reported on the diagnostic stream without stopping the batch.
    Failing to create a target directory aborts the batch by propagating
    :class:`OSError`. A manifest mismatch, or a downloaded file that cannot be
    re-read for verification, aborts it only when the policy is strict.
    """

    def __init__(
        self,
        fetcher: AssetFetcher,
        *,
        stderr: TextIO | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self.fetcher = fetcher
        self._stderr = stderr
        self.headers = dict(headers or BROWSER_HEADERS)
        self.logger = get_logger("download")

    @property
    def stderr(self) -> TextIO:
        return self._stderr if self._stderr is not None else sys.stderr

    def run(
        self,
        brands: Sequence[BrandAssetSet],
        root: Path | str,
        policy: DownloadPolicy | None = None,
    ) -> DownloadReport:
        root = Path(root)
        policy = policy or DownloadPolicy()
        report = DownloadReport()
        for brand in brands:
            target = target_directory(root, brand, len(brands))
            self._ensure_directory(target)
            self.logger.debug("Downloading assets for %s into %s", brand.domain, target)
            for asset in plan_assets(brand):
                self._process_asset(asset, target / asset.filename, root, policy, report)
        self.logger.debug(
            "Download batch finished: %d downloaded, %d failed",
            len(report.downloaded),
            len(report.failures),
        )
        return report

    # ------------------------------------------------------------------
    # Internal helpers

    def _ensure_directory(self, target: Path) -> None:
        try:
            target.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            self._report(f"Error: failed to create directory {target}: {exc}")
            raise

    def _process_asset(
        self,
        asset: PlannedAsset,
        dest: Path,
        root: Path,
        policy: DownloadPolicy,
        report: DownloadReport,
    ) -> None:
        try:
            self._download(asset.url, dest)
        except (NetworkError, OSError) as exc:
            self._report(f"Error: failed to download {asset.filename}: {exc}")
            report.failures.append(AssetFailure(path=dest, reason=str(exc)))
            return

        self._report(f"Downloaded: {dest}")
        report.downloaded.append(dest)

        if policy.write_sidecar:
            try:
                checksum.write_sidecar(dest)
            except OSError as exc:
                self._report(f"Error: failed to write checksum for {asset.filename}: {exc}")

        if policy.manifest is not None:
            try:
                checksum.verify_against_manifest(dest, root, policy.manifest)
            except (ChecksumMismatchError, OSError) as exc:
                self._report(
                    f"Error: checksum verification failed for {asset.filename}: {exc}"
                )
                report.checksum_failures.append(AssetFailure(path=dest, reason=str(exc)))
                if policy.strict:
                    raise

        if policy.collect_checksums:
            try:
                report.checksum_entries.append(checksum.build_entry(dest, root))
            except OSError as exc:
                self._report(f"Error: failed to compute checksum for {asset.filename}: {exc}")

    def _download(self, url: str, dest: Path) -> None:
        fetch_to_file(self.fetcher, url, dest, self.headers)

    def _report(self, message: str) -> None:
        print(message, file=self.stderr)


__all__ = [
    "AssetFailure",
    "DownloadOrchestrator",
    "DownloadPolicy",
    "DownloadReport",
    "DownloadStatus",
    "PlannedAsset",
    "extension_from_url",
    "fetch_to_file",
    "plan_assets",
    "save_response",
    "target_directory",
]
