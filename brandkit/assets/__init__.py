"""Asset downloads and checksum verification."""

from .download import (
    DownloadOrchestrator,
    DownloadPolicy,
    DownloadReport,
    DownloadStatus,
    fetch_to_file,
    save_response,
)
from .fetcher import AssetFetcher, AssetResponse, HttpAssetFetcher

__all__ = [
    "AssetFetcher",
    "AssetResponse",
    "DownloadOrchestrator",
    "DownloadPolicy",
    "DownloadReport",
    "DownloadStatus",
    "HttpAssetFetcher",
    "fetch_to_file",
    "save_response",
]
