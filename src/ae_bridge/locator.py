"""Locate an installed Adobe After Effects application bundle.

On macOS the application is a directory with an ``.app`` suffix, usually
nested in a version folder::

    /Applications/Adobe After Effects 2024/Adobe After Effects 2024.app
    /Applications/Adobe After Effects 2024/Adobe After Effects Render Engine 2024.app

Names are matched by substring so version suffixes need no registry.
"""

import asyncio
import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

APP_NAME = "Adobe After Effects"
RENDER_ENGINE_QUALIFIER = " Render Engine"
BUNDLE_SUFFIX = ".app"


@dataclass(frozen=True)
class ApplicationHandle:
    """An installed After Effects application bundle."""

    path: Path

    @property
    def is_render_engine(self) -> bool:
        """Whether this handle points at the Render Engine bundle."""
        return RENDER_ENGINE_QUALIFIER.strip() in self.path.stem

    def __str__(self) -> str:
        return str(self.path)


def _is_accessible_dir(path: Path) -> bool:
    return path.is_dir() and os.access(path, os.R_OK | os.X_OK)


def matches_app_name(path: Path, render_engine: bool = False) -> bool:
    """Check whether a bundle name belongs to After Effects.

    Without ``render_engine`` the Render Engine bundle is rejected, so it is
    never picked over the main application sitting beside it.
    """
    stem = path.stem
    if render_engine:
        return APP_NAME + RENDER_ENGINE_QUALIFIER in stem
    return APP_NAME in stem and RENDER_ENGINE_QUALIFIER.strip() not in stem


def _list_dir(directory: Path) -> list[Path]:
    return sorted(directory.iterdir(), key=lambda p: p.name)


def _find_in_dir(entries: list[Path], render_engine: bool) -> Path | None:
    for entry in entries:
        # The application is a directory, so it can't be checked as a file
        if (
            entry.suffix == BUNDLE_SUFFIX
            and matches_app_name(entry, render_engine)
            and _is_accessible_dir(entry)
        ):
            return entry
    return None


def find_after_effects_sync(
    root: Path, render_engine: bool = False
) -> ApplicationHandle | None:
    """
    Search a directory tree for the After Effects application bundle.

    Direct children of a directory are checked first; then each child whose
    name contains "Adobe After Effects" is searched the same way, depth-first,
    stopping at the first match.

    Args:
        root: Directory to start from, usually /Applications.
        render_engine: Look for the Render Engine bundle instead.

    Returns:
        Handle to the first matching bundle, or None if there is none.

    Raises:
        OSError: If a directory can't be listed.
    """
    pending = [Path(root)]
    while pending:
        directory = pending.pop()
        entries = _list_dir(directory)

        found = _find_in_dir(entries, render_engine)
        if found is not None:
            logger.debug("Found After Effects at %s", found)
            return ApplicationHandle(found)

        # Reversed so the first entry is searched first
        pending.extend(
            entry
            for entry in reversed(entries)
            if APP_NAME in entry.stem and _is_accessible_dir(entry)
        )

    logger.debug("No After Effects bundle under %s", root)
    return None


async def find_after_effects(
    root: Path, render_engine: bool = False
) -> ApplicationHandle | None:
    """Search for After Effects without blocking the event loop.

    Same contract as ``find_after_effects_sync``.
    """
    return await asyncio.to_thread(find_after_effects_sync, root, render_engine)
