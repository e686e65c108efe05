"""SHA-256 digests, sidecar files, and ``sha256sum``-style manifests.

Manifest lines are ``<hexdigest>  <relative/path>``. Parsing ignores blank
lines, ``#`` comments, and lines with fewer than two fields; a leading ``*``
(binary marker) or ``./`` on the path is stripped. Writing always emits the
entries sorted by path so repeated runs produce identical files.
"""

from __future__ import annotations

import hashlib
import os
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional

from ..errors import ChecksumMismatchError, MissingManifestEntryError, ValidationError
from ..logging import get_logger
from ..models import ChecksumEntry

SIDECAR_SUFFIX = ".sha256"
_CHUNK_SIZE = 1024 * 1024

logger = get_logger("checksum")


def digest(path: Path | str) -> str:
    """Return the hex SHA-256 of ``path``, streamed in chunks."""
    hasher = hashlib.sha256()
    with Path(path).open("rb") as handle:
        for chunk in iter(lambda: handle.read(_CHUNK_SIZE), b""):
            hasher.update(chunk)
    return hasher.hexdigest()


def verify(path: Path | str, expected: str) -> bool:
    """Compare the digest of ``path`` with ``expected`` (case-insensitive, trimmed)."""
    return digest(path).lower() == expected.strip().lower()


def parse_manifest(path: Path | str) -> Dict[str, str]:
    """Read a manifest into ``{relative_path: hexdigest}``."""
    text = Path(path).read_text(encoding="utf-8")
    return parse_manifest_text(text)


def parse_manifest_text(text: str) -> Dict[str, str]:
    entries: Dict[str, str] = {}
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        parts = stripped.split()
        if len(parts) < 2:
            continue
        hex_digest, filename = parts[0], parts[1]
        filename = filename.removeprefix("*").removeprefix("./")
        if filename:
            entries[filename] = hex_digest
    return entries


def relative_key(path: Path | str, root: Path | str | None) -> str:
    """Return ``path`` relative to ``root`` when meaningful, else its base name."""
    path = Path(path)
    if root:
        try:
            rel = os.path.relpath(path, root)
        except ValueError:
            rel = ""
        if rel and rel != ".":
            return Path(rel).as_posix()
    return path.name


def candidate_keys(path: Path | str, root: Path | str | None) -> List[str]:
    path = Path(path)
    keys = [relative_key(path, root)]
    if path.name not in keys:
        keys.append(path.name)
    return keys


def build_entry(path: Path | str, root: Path | str | None = None) -> ChecksumEntry:
    return ChecksumEntry(path=relative_key(path, root), digest=digest(path))


def write_sidecar(path: Path | str) -> Path:
    """Write ``<path>.sha256`` holding ``<hex>  <basename>``."""
    path = Path(path)
    sidecar = path.with_name(path.name + SIDECAR_SUFFIX)
    sidecar.write_text(f"{digest(path)}  {path.name}\n", encoding="utf-8")
    return sidecar


def merge_entries(
    existing: Mapping[str, str], entries: Iterable[ChecksumEntry]
) -> Dict[str, str]:
    """Overlay ``entries`` on ``existing``; later entries win per path."""
    merged = dict(existing)
    for entry in entries:
        if not entry.path or not entry.digest:
            continue
        merged[entry.path] = entry.digest
    return merged


def render_manifest(entries: Mapping[str, str]) -> str:
    return "".join(f"{entries[name]}  {name}\n" for name in sorted(entries))


def write_manifest(
    path: Path | str, entries: Iterable[ChecksumEntry], *, append: bool = False
) -> Dict[str, str]:
    """Persist ``entries`` to ``path``, merging into an existing manifest when ``append``.

    Returns the mapping that was written. A missing manifest is treated as empty
    when appending; any other read failure propagates.
    """
    path = Path(path)
    entries = list(entries)
    if not entries and not append:
        raise ValidationError("no downloaded files to write")

    existing: Dict[str, str] = {}
    if append:
        try:
            existing = parse_manifest(path)
        except FileNotFoundError:
            logger.debug("Manifest %s does not exist yet; starting fresh", path)

    merged = merge_entries(existing, entries)
    if not merged:
        raise ValidationError("no downloaded files to write")

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_manifest(merged), encoding="utf-8")
    logger.debug("Wrote %d manifest entries to %s", len(merged), path)
    return merged


def verify_against_manifest(
    path: Path | str, root: Path | str | None, manifest: Mapping[str, str]
) -> None:
    """Check ``path`` against its manifest entry (root-relative key first, then base name)."""
    path = Path(path)
    expected: Optional[str] = None
    for key in candidate_keys(path, root):
        if key in manifest:
            expected = manifest[key]
            break
    if expected is None:
        raise MissingManifestEntryError(
            f"no manifest entry for {path.name}", path=str(path)
        )
    actual = digest(path)
    if actual.lower() != expected.strip().lower():
        raise ChecksumMismatchError(
            f"expected {expected}, got {actual}",
            path=str(path),
            expected=expected,
            actual=actual,
        )


__all__ = [
    "SIDECAR_SUFFIX",
    "build_entry",
    "candidate_keys",
    "digest",
    "merge_entries",
    "parse_manifest",
    "parse_manifest_text",
    "relative_key",
    "render_manifest",
    "verify",
    "verify_against_manifest",
    "write_manifest",
    "write_sidecar",
]
