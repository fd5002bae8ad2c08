"""Pytest fixtures for ae-bridge tests."""

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from ae_bridge.config import Settings
from ae_bridge.locator import ApplicationHandle
from ae_bridge.logging import reset_logging


def _make_bundle(parent: Path, name: str) -> Path:
    """Create a fake .app bundle directory."""
    bundle = parent / name
    (bundle / "Contents" / "MacOS").mkdir(parents=True)
    return bundle


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    yield
    reset_logging()


@pytest.fixture
def applications(tmp_path: Path) -> Path:
    """Create an empty fake /Applications directory."""
    root = tmp_path / "Applications"
    root.mkdir()
    return root


@pytest.fixture
def installed(applications: Path) -> Path:
    """Create a typical After Effects install and return the main bundle."""
    version_dir = applications / "Adobe After Effects 2024"
    version_dir.mkdir()
    _make_bundle(version_dir, "Adobe After Effects Render Engine 2024.app")
    _make_bundle(applications, "Safari.app")
    return _make_bundle(version_dir, "Adobe After Effects 2024.app")


@pytest.fixture
def script_dir(tmp_path: Path) -> Path:
    """Directory for generated AppleScript files."""
    path = tmp_path / "scripts"
    path.mkdir()
    return path


@pytest.fixture
def settings(applications: Path, script_dir: Path, tmp_path: Path) -> Settings:
    """Settings pointing at the fake applications and script directories."""
    return Settings(
        program_dir=applications,
        script_dir=script_dir,
        config_dir=tmp_path / "config",
        log_dir=tmp_path / "logs",
        _env_file=None,
    )


@pytest.fixture
def app_handle() -> ApplicationHandle:
    """Handle for the main After Effects bundle."""
    return ApplicationHandle(
        Path("/Applications/Adobe After Effects 2024/Adobe After Effects 2024.app")
    )


@pytest.fixture
def render_engine_handle() -> ApplicationHandle:
    """Handle for the Render Engine bundle."""
    return ApplicationHandle(
        Path(
            "/Applications/Adobe After Effects 2024/"
            "Adobe After Effects Render Engine 2024.app"
        )
    )


@pytest.fixture
def make_bundle() -> Callable[[Path, str], Path]:
    """Factory for fake .app bundle directories."""
    return _make_bundle
