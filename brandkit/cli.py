"""CLI entrypoints for brandkit commands."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import TextIO

from . import __version__
from .api.client import BrandfetchClient
from .api.logo import LOGO_FALLBACKS, LOGO_FORMATS, LOGO_THEMES, LOGO_TYPES, LogoOptions
from .assets import checksum
from .assets.fetcher import HttpAssetFetcher
from .config import ExportOptions, Settings, load_settings
from .errors import BrandkitError, ChecksumMismatchError
from .logging import configure_logging, get_logger
from .logo import LogoDownloadCommand, LogoDownloadRequest
from .models import ChecksumEntry
from .quick import QuickCommand

COLOR_MODES = ("auto", "always", "never")


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_quick_parser(subparsers: argparse._SubParsersAction) -> None:
    quick_parser = subparsers.add_parser(
        "quick",
        help="Get logos, favicon, colors, and fonts for one or more brands.",
        description=(
            "Fetch SVG logos (light + dark), favicon, colors, and fonts. "
            "With several identifiers, CSS variables are prefixed per brand, "
            "Tailwind output nests one object per brand, and downloads go to "
            "one subdirectory per brand."
        ),
    )
    _add_verbose_option(quick_parser, suppress_default=True)
    quick_parser.add_argument("identifiers", nargs="+", help="Domains, brand IDs, or URLs.")
    quick_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output format: text, json (defaults to BRANDKIT_OUTPUT or text).",
    )
    quick_parser.add_argument(
        "--color",
        choices=COLOR_MODES,
        default="auto",
        help="Colorize hex values in text output.",
    )
    quick_parser.add_argument(
        "--css",
        action="store_true",
        help="Output colors and fonts as CSS custom properties.",
    )
    quick_parser.add_argument(
        "--tailwind",
        action="store_true",
        help="Output colors and fonts as a Tailwind CSS config.",
    )
    quick_parser.add_argument(
        "-d",
        "--download",
        type=Path,
        default=None,
        help="Download assets to the given directory.",
    )
    quick_parser.add_argument(
        "--sha256",
        action="store_true",
        help="Write a .sha256 file next to each download.",
    )
    quick_parser.add_argument(
        "--sha256-manifest",
        type=Path,
        default=None,
        help="Verify downloads against a SHA-256 manifest file.",
    )
    quick_parser.add_argument(
        "--sha256-manifest-out",
        type=Path,
        default=None,
        help="Write a SHA-256 manifest for downloads.",
    )
    quick_parser.add_argument(
        "--sha256-manifest-append",
        action="store_true",
        help="Merge checksums into an existing manifest instead of replacing it.",
    )
    quick_parser.add_argument(
        "--sha256-manifest-verify",
        action="store_true",
        help="Fail when a download does not match the manifest.",
    )


def _add_checksum_parser(subparsers: argparse._SubParsersAction) -> None:
    checksum_parser = subparsers.add_parser(
        "checksum",
        help="Compute and verify SHA-256 checksums of local files.",
    )
    _add_verbose_option(checksum_parser, suppress_default=True)
    checksum_sub = checksum_parser.add_subparsers(dest="checksum_command", required=True)

    verify_parser = checksum_sub.add_parser(
        "verify",
        help="Verify a file against a literal digest or a manifest.",
    )
    _add_verbose_option(verify_parser, suppress_default=True)
    verify_parser.add_argument("file", type=Path)
    source = verify_parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--sha256", dest="expected", help="Expected hex digest.")
    source.add_argument("--manifest", type=Path, help="Manifest file to look the file up in.")
    verify_parser.add_argument(
        "--root",
        type=Path,
        default=None,
        help="Directory manifest paths are relative to.",
    )

    manifest_parser = checksum_sub.add_parser(
        "manifest",
        help="Write a SHA-256 manifest for the given files.",
    )
    _add_verbose_option(manifest_parser, suppress_default=True)
    manifest_parser.add_argument("files", nargs="+", type=Path)
    manifest_parser.add_argument("--out", type=Path, required=True, help="Manifest path.")
    manifest_parser.add_argument(
        "--root",
        type=Path,
        default=None,
        help="Directory manifest paths are relative to.",
    )
    manifest_parser.add_argument(
        "--append",
        action="store_true",
        help="Merge into an existing manifest.",
    )


def _add_logo_parser(subparsers: argparse._SubParsersAction) -> None:
    logo_parser = subparsers.add_parser(
        "logo",
        help="Work with single logo assets from the Logo API CDN.",
    )
    _add_verbose_option(logo_parser, suppress_default=True)
    logo_sub = logo_parser.add_subparsers(dest="logo_command", required=True)

    download_parser = logo_sub.add_parser(
        "download",
        help="Download one logo asset.",
        description=(
            "Download a logo from the Logo API CDN. Without --path the file is named "
            "after the identifier with the extension taken from the asset URL."
        ),
    )
    _add_verbose_option(download_parser, suppress_default=True)
    download_parser.add_argument("identifier", help="Domain, brand ID, or URL.")
    download_parser.add_argument("--format", choices=LOGO_FORMATS, default="svg")
    download_parser.add_argument("--theme", choices=LOGO_THEMES, default="light")
    download_parser.add_argument("--type", choices=LOGO_TYPES, default="logo")
    download_parser.add_argument("--fallback", choices=LOGO_FALLBACKS, default="")
    download_parser.add_argument("--width", type=int, default=0, help="Logo width (px).")
    download_parser.add_argument("--height", type=int, default=0, help="Logo height (px).")
    download_parser.add_argument("--path", type=Path, default=None, help="Output file path.")
    download_parser.add_argument(
        "--dir",
        dest="directory",
        type=Path,
        default=None,
        help="Output directory (defaults to the current directory).",
    )
    download_parser.add_argument(
        "--sha256",
        default=None,
        help="Verify the downloaded file against this hex digest.",
    )
    download_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output format: text, json (defaults to BRANDKIT_OUTPUT or text).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="brandkit",
        description="Fetch brand logos, colors, and fonts and export them as developer artifacts.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config.yml (defaults to $XDG_CONFIG_HOME/brandkit/config.yml).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write debug logs to this file.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_quick_parser(subparsers)
    _add_logo_parser(subparsers)
    _add_checksum_parser(subparsers)
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for brandkit commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)
    logger = get_logger("cli")

    try:
        if args.command == "quick":
            settings = load_settings(args.config)
            _run_quick(args, settings)
        elif args.command == "logo":
            settings = load_settings(args.config)
            _run_logo(args, settings)
        elif args.command == "checksum":
            _run_checksum(args)
        else:  # pragma: no cover - argparse enforces choices
            parser.exit(1, "Unknown command\n")
    except (BrandkitError, OSError) as exc:
        logger.debug("Command failed", exc_info=True)
        parser.exit(1, f"Error: {exc}\n")
    except Exception as exc:  # pragma: no cover - defensive guard
        parser.exit(1, f"brandkit {args.command} failed: {exc}\nRun with --verbose for more details.\n")


def _export_options(args: argparse.Namespace, settings: Settings) -> ExportOptions:
    return ExportOptions(
        output_format=(args.output or settings.output).lower(),
        css=bool(args.css),
        tailwind=bool(args.tailwind),
        download_dir=args.download,
        sha256=bool(args.sha256),
        manifest_path=args.sha256_manifest,
        manifest_out=args.sha256_manifest_out,
        manifest_append=bool(args.sha256_manifest_append),
        manifest_strict=bool(args.sha256_manifest_verify),
    )


def _run_quick(args: argparse.Namespace, settings: Settings) -> None:
    options = _export_options(args, settings).validate()
    client = BrandfetchClient(
        settings.require_api_key(),
        base_url=settings.base_url,
        request_timeout=settings.request_timeout,
    )
    fetcher = HttpAssetFetcher(timeout=settings.request_timeout)
    command = QuickCommand(
        client,
        fetcher,
        colorize=_resolve_color(args.color, options.output_format, sys.stdout),
    )
    command.run(args.identifiers, options)


def _run_logo(args: argparse.Namespace, settings: Settings) -> None:
    request = LogoDownloadRequest(
        options=LogoOptions(
            identifier=args.identifier,
            theme=args.theme,
            type=args.type,
            format=args.format,
            fallback=args.fallback,
            width=args.width,
            height=args.height,
        ),
        path=args.path,
        directory=args.directory,
        sha256=args.sha256,
        output_format=(args.output or settings.output).lower(),
    ).validate()
    command = LogoDownloadCommand(
        settings.require_client_id(),
        HttpAssetFetcher(timeout=settings.request_timeout),
        base_url=settings.logo_base_url,
    )
    command.run(request)


def _run_checksum(args: argparse.Namespace) -> None:
    if args.checksum_command == "verify":
        if args.manifest is not None:
            manifest = checksum.parse_manifest(args.manifest)
            checksum.verify_against_manifest(args.file, args.root, manifest)
        elif not checksum.verify(args.file, args.expected):
            raise ChecksumMismatchError(
                f"sha256 mismatch for {args.file}", path=str(args.file), expected=args.expected
            )
        print(f"{args.file}: OK")
    elif args.checksum_command == "manifest":
        entries: list[ChecksumEntry] = [
            checksum.build_entry(path, args.root) for path in args.files
        ]
        written = checksum.write_manifest(args.out, entries, append=bool(args.append))
        print(f"Wrote {len(written)} entries to {args.out}")


def _resolve_color(mode: str, output_format: str, stream: TextIO) -> bool:
    if output_format == "json" or os.environ.get("NO_COLOR"):
        return False
    if mode == "always":
        return True
    if mode == "never":
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


if __name__ == "__main__":
    main(sys.argv[1:])
