"""Shared test fixtures for lilacstat."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from lilacstat.config import StatusConfig
from lilacstat.core.watermark import Watermark


@pytest.fixture
def tmp_dir(tmp_path: Path) -> Path:
    """Provide a temporary directory for test artifacts."""
    return tmp_path


# ---------------------------------------------------------------------------
# Tree factories — shared across test modules
# ---------------------------------------------------------------------------


@pytest.fixture
def packages_dir(tmp_dir: Path) -> Path:
    path = tmp_dir / "archlinuxcn"
    path.mkdir()
    return path


@pytest.fixture
def make_package(packages_dir: Path) -> Callable[..., Path]:
    """Factory fixture: create ``<packages>/<name>/lilac.yaml``.

    ``maintainers`` is a list of github ids, or None to omit the metadata
    file.  ``raw`` writes the metadata text verbatim.
    """

    def _factory(
        name: str,
        maintainers: list[str] | None = None,
        *,
        raw: str | None = None,
    ) -> Path:
        package_dir = packages_dir / name
        package_dir.mkdir()
        if raw is not None:
            (package_dir / "lilac.yaml").write_text(raw, encoding="utf-8")
        elif maintainers is not None:
            lines = ["maintainers:"]
            for github in maintainers:
                lines.append(f"  - github: {github}")
                lines.append(f"    email: {github}@example.org")
            (package_dir / "lilac.yaml").write_text("\n".join(lines) + "\n", encoding="utf-8")
        return package_dir

    return _factory


@pytest.fixture
def build_log_path(tmp_dir: Path) -> Path:
    return tmp_dir / "build.log"


@pytest.fixture
def write_build_log(build_log_path: Path) -> Callable[[list[str]], Path]:
    def _factory(lines: list[str]) -> Path:
        build_log_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return build_log_path

    return _factory


@pytest.fixture
def capture_dir(tmp_dir: Path) -> Path:
    path = tmp_dir / "log"
    path.mkdir()
    return path


@pytest.fixture
def html_dir(tmp_dir: Path) -> Path:
    return tmp_dir / "public_html" / "log"


@pytest.fixture
def make_capture(capture_dir: Path) -> Callable[..., Path]:
    """Factory fixture: create ``<captures>/<folder>/<filename>``."""

    def _factory(folder: str, filename: str, content: bytes = b"build output\n") -> Path:
        folder_dir = capture_dir / folder
        folder_dir.mkdir(exist_ok=True)
        path = folder_dir / filename
        path.write_bytes(content)
        return path

    return _factory


@pytest.fixture
def watermark(tmp_dir: Path) -> Watermark:
    """A watermark seeded at 0, so every folder is pending."""
    mark = Watermark(tmp_dir / "config" / "timestamp")
    mark.initialize(0)
    return mark


@pytest.fixture
def status_config(
    tmp_dir: Path,
    packages_dir: Path,
    build_log_path: Path,
    capture_dir: Path,
    html_dir: Path,
    watermark: Watermark,
) -> StatusConfig:
    return StatusConfig(
        packages_dir=packages_dir,
        build_log_path=build_log_path,
        capture_dir=capture_dir,
        html_dir=html_dir,
        checkpoint_path=watermark.path,
        index_path=tmp_dir / "public_html" / "build-log.json",
    )


# ---------------------------------------------------------------------------
# Rendering collaborators
# ---------------------------------------------------------------------------


@pytest.fixture
def fake_render() -> Callable[[bytes], str]:
    """Stand-in for the terminal transform: wraps the decoded bytes in a span."""

    def _render(raw: bytes) -> str:
        return "<span>" + raw.decode("utf-8") + "</span>"

    return _render


@pytest.fixture
def fake_stylesheet() -> str:
    return ".term-container { color: white; }"
