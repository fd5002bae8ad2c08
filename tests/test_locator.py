"""Tests for After Effects discovery."""

from collections.abc import Callable
from pathlib import Path

import pytest

from ae_bridge.locator import (
    ApplicationHandle,
    find_after_effects,
    find_after_effects_sync,
    matches_app_name,
)

BundleFactory = Callable[[Path, str], Path]


class TestMatchesAppName:
    """Tests for matches_app_name()."""

    def test_versioned_name(self) -> None:
        """Version suffixes still match."""
        assert matches_app_name(Path("Adobe After Effects 2024.app"))

    def test_render_engine_rejected_by_default(self) -> None:
        """The Render Engine is not the main application."""
        assert not matches_app_name(Path("Adobe After Effects Render Engine 2024.app"))

    def test_render_engine_requested(self) -> None:
        """With the flag only Render Engine names match."""
        assert matches_app_name(
            Path("Adobe After Effects Render Engine 2024.app"), render_engine=True
        )
        assert not matches_app_name(Path("Adobe After Effects 2024.app"), render_engine=True)

    def test_other_app(self) -> None:
        """Unrelated names never match."""
        assert not matches_app_name(Path("Adobe Photoshop 2024.app"))


class TestApplicationHandle:
    """Tests for ApplicationHandle."""

    def test_is_render_engine(
        self, app_handle: ApplicationHandle, render_engine_handle: ApplicationHandle
    ) -> None:
        """Render Engine handles are recognised by name."""
        assert not app_handle.is_render_engine
        assert render_engine_handle.is_render_engine

    def test_str(self, app_handle: ApplicationHandle) -> None:
        """A handle prints as its path."""
        assert str(app_handle).endswith("Adobe After Effects 2024.app")


class TestFindAfterEffectsSync:
    """Tests for find_after_effects_sync()."""

    def test_nested_install(self, applications: Path, installed: Path) -> None:
        """The bundle inside the version folder is found."""
        handle = find_after_effects_sync(applications)
        assert handle == ApplicationHandle(installed)

    def test_direct_child(
        self, applications: Path, make_bundle: BundleFactory
    ) -> None:
        """A bundle directly in the root is found."""
        bundle = make_bundle(applications, "Adobe After Effects CC 2019.app")
        assert find_after_effects_sync(applications) == ApplicationHandle(bundle)

    def test_not_installed(
        self, applications: Path, make_bundle: BundleFactory
    ) -> None:
        """An empty tree yields None."""
        make_bundle(applications, "Safari.app")
        (applications / "Utilities").mkdir()
        assert find_after_effects_sync(applications) is None

    def test_render_engine(self, applications: Path, installed: Path) -> None:
        """The flag selects the Render Engine bundle."""
        handle = find_after_effects_sync(applications, render_engine=True)
        assert handle is not None
        assert handle.path.name == "Adobe After Effects Render Engine 2024.app"
        assert handle.is_render_engine

    def test_plain_preferred_over_render_engine(
        self, applications: Path, make_bundle: BundleFactory
    ) -> None:
        """Without the flag the Render Engine is never picked."""
        make_bundle(applications, "Adobe After Effects Render Engine 2024.app")
        plain = make_bundle(applications, "Adobe After Effects 2024.app")
        assert find_after_effects_sync(applications) == ApplicationHandle(plain)

    def test_only_render_engine_installed(
        self, applications: Path, make_bundle: BundleFactory
    ) -> None:
        """A lone Render Engine does not count as After Effects."""
        make_bundle(applications, "Adobe After Effects Render Engine 2024.app")
        assert find_after_effects_sync(applications) is None

    def test_requires_bundle_suffix(self, applications: Path) -> None:
        """A matching folder without .app is not a bundle."""
        (applications / "Adobe After Effects 2024").mkdir()
        assert find_after_effects_sync(applications) is None

    def test_requires_directory(self, applications: Path) -> None:
        """A file with a bundle name is ignored."""
        (applications / "Adobe After Effects 2024.app").write_text("not a bundle")
        assert find_after_effects_sync(applications) is None

    def test_unrelated_folders_not_searched(
        self, applications: Path, make_bundle: BundleFactory
    ) -> None:
        """Only folders named after After Effects are descended into."""
        other = applications / "Adobe"
        other.mkdir()
        make_bundle(other, "Adobe After Effects 2024.app")
        assert find_after_effects_sync(applications) is None

    def test_first_version_wins(
        self, applications: Path, make_bundle: BundleFactory
    ) -> None:
        """Version folders are searched depth-first in name order."""
        for year in ("2024", "2023"):
            folder = applications / f"Adobe After Effects {year}"
            folder.mkdir()
            make_bundle(folder, f"Adobe After Effects {year}.app")

        handle = find_after_effects_sync(applications)
        assert handle is not None
        assert handle.path.name == "Adobe After Effects 2023.app"

    def test_deep_nesting(
        self, applications: Path, make_bundle: BundleFactory
    ) -> None:
        """Nested After Effects folders are followed."""
        folder = applications / "Adobe After Effects" / "Adobe After Effects 2024"
        folder.mkdir(parents=True)
        bundle = make_bundle(folder, "Adobe After Effects 2024.app")
        assert find_after_effects_sync(applications) == ApplicationHandle(bundle)

    def test_missing_root(self, tmp_path: Path) -> None:
        """Listing errors propagate."""
        with pytest.raises(FileNotFoundError):
            find_after_effects_sync(tmp_path / "nope")


class TestFindAfterEffects:
    """Tests for the async find_after_effects()."""

    @pytest.mark.asyncio
    async def test_same_result_as_sync(self, applications: Path, installed: Path) -> None:
        """Both forms find the same bundle."""
        assert await find_after_effects(applications) == find_after_effects_sync(applications)

    @pytest.mark.asyncio
    async def test_not_installed(self, applications: Path) -> None:
        """An empty tree yields None."""
        assert await find_after_effects(applications) is None

    @pytest.mark.asyncio
    async def test_missing_root(self, tmp_path: Path) -> None:
        """Listing errors propagate."""
        with pytest.raises(FileNotFoundError):
            await find_after_effects(tmp_path / "nope")
