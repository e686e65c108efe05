"""The ``quick`` pipeline: fetch brands, emit exports, download verified assets."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, TextIO

from .api.client import BrandSource
from .assets import checksum
from .assets.download import DownloadOrchestrator, DownloadPolicy, DownloadReport
from .assets.fetcher import AssetFetcher
from .config import ExportOptions
from .errors import BrandFetchError
from .export import format_css_batch, format_tailwind_batch
from .logging import get_logger
from .models import BrandAssetSet
from .output import format_json, format_text_batch


@dataclass
class QuickOutcome:
    """What a ``quick`` run produced."""

    brands: List[BrandAssetSet] = field(default_factory=list)
    fetch_errors: List[str] = field(default_factory=list)
    download: Optional[DownloadReport] = None
    manifest: Optional[Dict[str, str]] = None


class QuickCommand:
    """Coordinates one ``quick`` invocation against injected collaborators."""

    def __init__(
        self,
        source: BrandSource,
        fetcher: AssetFetcher,
        *,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
        colorize: bool = False,
    ) -> None:
        self.source = source
        self.fetcher = fetcher
        self._stdout = stdout
        self._stderr = stderr
        self.colorize = colorize
        self.logger = get_logger("quick")

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr if self._stderr is not None else sys.stderr

    def run(self, identifiers: Sequence[str], options: ExportOptions) -> QuickOutcome:
        options.validate()

        manifest: Optional[Dict[str, str]] = None
        if options.download_dir is not None and options.manifest_path is not None:
            manifest = checksum.parse_manifest(options.manifest_path)
            self.logger.debug(
                "Loaded %d manifest entries from %s", len(manifest), options.manifest_path
            )

        outcome = QuickOutcome()
        self._fetch(identifiers, outcome)

        print(self.render(outcome.brands, options), file=self.stdout)

        if options.download_dir is None:
            return outcome

        orchestrator = DownloadOrchestrator(self.fetcher, stderr=self.stderr)
        policy = DownloadPolicy(
            write_sidecar=options.sha256,
            manifest=manifest,
            strict=options.manifest_strict,
            collect_checksums=options.manifest_out is not None,
        )
        outcome.download = orchestrator.run(outcome.brands, options.download_dir, policy)

        if options.manifest_out is not None:
            outcome.manifest = checksum.write_manifest(
                options.manifest_out,
                outcome.download.checksum_entries,
                append=options.manifest_append,
            )
        return outcome

    def render(self, brands: Sequence[BrandAssetSet], options: ExportOptions) -> str:
        if options.css:
            return format_css_batch(brands)
        if options.tailwind:
            return format_tailwind_batch(brands)
        if options.output_format == "json":
            return format_json(brands)
        return format_text_batch(brands, colorize=self.colorize)

    def _fetch(self, identifiers: Sequence[str], outcome: QuickOutcome) -> None:
        for identifier in identifiers:
            try:
                brand = self.source.fetch_brand(identifier)
            except Exception as exc:
                outcome.fetch_errors.append(f"{identifier}: {exc}")
                print(f"Error fetching {identifier}: {exc}", file=self.stderr)
                self.logger.debug("Brand fetch failed for %s", identifier, exc_info=True)
                continue
            outcome.brands.append(brand)

        if not outcome.brands:
            raise BrandFetchError(
                "failed to fetch all identifiers: " + "; ".join(outcome.fetch_errors)
            )


__all__ = ["QuickCommand", "QuickOutcome"]
