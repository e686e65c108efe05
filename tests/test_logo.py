"""Tests for the single-logo download command."""

from __future__ import annotations

import hashlib
import io
import json
from pathlib import Path

import pytest

from brandkit.api.logo import LogoOptions, build_logo_url
from brandkit.errors import ChecksumMismatchError, ConfigError, NetworkError, ValidationError
from brandkit.logo import (
    LogoDownloadCommand,
    LogoDownloadRequest,
    default_download_path,
    sanitize_file_name,
)

GITHUB_URL = "https://cdn.brandfetch.io/github.com/theme/light/type/logo.svg?c=cid"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("github.com", "github.com"),
        ("my brand", "my-brand"),
        ("foo/bar", "bar"),
        ("foo\\bar", "foo\\bar"),
        ("foo:bar", "foo-bar"),
        ("foo..bar", "foo..bar"),
        ("../../../etc/passwd", "passwd"),
        ("....", "...."),
        ("", "logo"),
        ("..", "logo"),
        (".", "logo"),
        ("foo/../bar", "bar"),
        ("https://github.com/", "github.com"),
    ],
)
def test_sanitize_file_name(value: str, expected: str) -> None:
    assert sanitize_file_name(value) == expected


def test_build_logo_url_defaults() -> None:
    assert build_logo_url("cid", LogoOptions("https://www.GitHub.com/")) == GITHUB_URL


def test_build_logo_url_with_all_segments() -> None:
    options = LogoOptions(
        "id_abc", theme="dark", type="icon", format="png", fallback="lettermark", width=64, height=32
    )

    url = build_logo_url("cid", options, base_url="https://cdn.example.com/")

    assert url == (
        "https://cdn.example.com/id_abc/w/64/h/32/theme/dark/fallback/lettermark/type/icon.png?c=cid"
    )


def test_build_logo_url_format_without_type_implies_icon() -> None:
    url = build_logo_url("cid", LogoOptions("github.com", theme="", type="", format="png"))

    assert url == "https://cdn.brandfetch.io/github.com/type/icon.png?c=cid"


def test_build_logo_url_requires_client_id() -> None:
    with pytest.raises(ConfigError, match="client ID is required"):
        build_logo_url("  ", LogoOptions("github.com"))


def test_default_download_path_prefers_url_extension(tmp_path: Path) -> None:
    assert default_download_path("github.com", GITHUB_URL, "png") == Path("github.com.svg")
    assert default_download_path("x", "https://cdn.example.com/x", "png", tmp_path) == tmp_path / "x.png"
    assert default_download_path("x", "https://cdn.example.com/x.", "") == Path("x.svg")


def test_download_to_directory_prints_path(tmp_path: Path, fake_fetcher) -> None:
    fetcher = fake_fetcher({GITHUB_URL: (200, b"logo-bytes")})
    stdout = io.StringIO()
    command = LogoDownloadCommand("cid", fetcher, stdout=stdout)

    result = command.run(
        LogoDownloadRequest(options=LogoOptions("github.com"), directory=tmp_path / "assets")
    )

    expected = tmp_path / "assets" / "github.com.svg"
    assert result.path == expected
    assert expected.read_bytes() == b"logo-bytes"
    assert stdout.getvalue() == f"{expected}\n"
    assert fetcher.calls[0][1]["User-Agent"].startswith("Mozilla/5.0")


def test_download_json_output(tmp_path: Path, fake_fetcher) -> None:
    stdout = io.StringIO()
    command = LogoDownloadCommand("cid", fake_fetcher({GITHUB_URL: (200, b"x")}), stdout=stdout)
    target = tmp_path / "logo.svg"

    command.run(
        LogoDownloadRequest(options=LogoOptions("github.com"), path=target, output_format="json")
    )

    assert json.loads(stdout.getvalue()) == {"url": GITHUB_URL, "path": str(target)}


def test_download_verifies_expected_digest(tmp_path: Path, fake_fetcher) -> None:
    command = LogoDownloadCommand(
        "cid", fake_fetcher({GITHUB_URL: (200, b"logo-bytes")}), stdout=io.StringIO()
    )
    digest = hashlib.sha256(b"logo-bytes").hexdigest().upper()

    result = command.run(
        LogoDownloadRequest(options=LogoOptions("github.com"), path=tmp_path / "l.svg", sha256=digest)
    )

    assert result.path.read_bytes() == b"logo-bytes"


def test_download_digest_mismatch_fails(tmp_path: Path, fake_fetcher) -> None:
    command = LogoDownloadCommand(
        "cid", fake_fetcher({GITHUB_URL: (200, b"logo-bytes")}), stdout=io.StringIO()
    )
    target = tmp_path / "l.svg"

    with pytest.raises(ChecksumMismatchError, match="sha256 mismatch for"):
        command.run(
            LogoDownloadRequest(options=LogoOptions("github.com"), path=target, sha256="0" * 64)
        )

    assert target.exists()


def test_download_short_body_fails_and_leaves_no_file(tmp_path: Path, fake_fetcher) -> None:
    command = LogoDownloadCommand(
        "cid", fake_fetcher({GITHUB_URL: (200, b"logo", 500)}), stdout=io.StringIO()
    )
    target = tmp_path / "l.svg"

    with pytest.raises(NetworkError, match="failed to download logo: unexpected EOF"):
        command.run(LogoDownloadRequest(options=LogoOptions("github.com"), path=target))

    assert not target.exists()


def test_path_and_dir_are_mutually_exclusive(tmp_path: Path, fake_fetcher) -> None:
    fetcher = fake_fetcher({})
    request = LogoDownloadRequest(
        options=LogoOptions("github.com"), path=tmp_path / "a.svg", directory=tmp_path
    )

    with pytest.raises(ValidationError, match="--path and --dir are mutually exclusive"):
        LogoDownloadCommand("cid", fetcher, stdout=io.StringIO()).run(request)

    assert fetcher.calls == []
