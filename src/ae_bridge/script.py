"""Generate the AppleScript that hands an ExtendScript body to After Effects."""

import asyncio
import logging
import uuid
from dataclasses import dataclass
from pathlib import Path

from ae_bridge.applescript import (
    RenderEngineUnsupportedError,
    ScriptFileCreationError,
    escape_applescript_string,
)
from ae_bridge.locator import ApplicationHandle

logger = logging.getLogger(__name__)

SCRIPT_PREFIX = "ae-command-"
SCRIPT_SUFFIX = ".scpt"


@dataclass(frozen=True)
class ScriptDocument:
    """A generated AppleScript and the file it is written to."""

    path: Path
    text: str


def build_script(body: str, app: ApplicationHandle, script_dir: Path) -> ScriptDocument:
    """
    Build the AppleScript document for running ``body`` in After Effects.

    Nothing is written to disk here.

    Args:
        body: ExtendScript source to run.
        app: The After Effects bundle to address.
        script_dir: Directory the script file will be written to.

    Raises:
        RenderEngineUnsupportedError: If ``app`` is the Render Engine.
    """
    if app.is_render_engine:
        raise RenderEngineUnsupportedError(str(app.path))

    text = "\n".join(
        [
            f'tell application "{escape_applescript_string(str(app.path))}"',
            f'  DoScript "{escape_applescript_string(body)}"',
            "end tell",
        ]
    )
    path = Path(script_dir) / f"{SCRIPT_PREFIX}{uuid.uuid4()}{SCRIPT_SUFFIX}"
    return ScriptDocument(path=path, text=text)


def write_script_sync(body: str, app: ApplicationHandle, script_dir: Path) -> ScriptDocument:
    """Build the AppleScript document and write it to a unique temp file.

    Raises:
        RenderEngineUnsupportedError: If ``app`` is the Render Engine.
        ScriptFileCreationError: If the file could not be written.
    """
    document = build_script(body, app, script_dir)
    try:
        document.path.write_text(document.text, encoding="utf-8")
    except OSError as e:
        raise ScriptFileCreationError(str(e), document.text) from e

    logger.debug("Wrote AppleScript to %s", document.path)
    return document


async def write_script(body: str, app: ApplicationHandle, script_dir: Path) -> ScriptDocument:
    """Async form of ``write_script_sync``; the write runs in a worker thread."""
    document = build_script(body, app, script_dir)
    try:
        await asyncio.to_thread(document.path.write_text, document.text, encoding="utf-8")
    except OSError as e:
        raise ScriptFileCreationError(str(e), document.text) from e

    logger.debug("Wrote AppleScript to %s", document.path)
    return document
