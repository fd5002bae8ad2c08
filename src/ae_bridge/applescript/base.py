"""AppleScript execution wrapper for the After Effects bridge."""

import asyncio
import logging
import subprocess
from pathlib import Path

from ae_bridge.applescript.errors import (
    AfterEffectsMissingError,
    AppleScriptError,
    AppleScriptTimeoutError,
)

logger = logging.getLogger(__name__)

# Known osascript failure texts and the error each one maps to. osascript
# reports every failure to address an application with the same generic
# parse error, so matching on its wording is the only signal available.
# Revisit when the host's wording changes.
HOST_FAILURE_PATTERNS_VERSION = 1
HOST_FAILURE_PATTERNS: tuple[tuple[str, type[AppleScriptError]], ...] = (
    ("Expected end of line but found", AfterEffectsMissingError),
)

_NAMED_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def escape_applescript_string(value: str) -> str:
    """Escape a string for safe inclusion in an AppleScript string literal.

    Backslashes, quotes, newlines, carriage returns and tabs use AppleScript's
    escape sequences. Other control characters have no escape sequence, so
    they are concatenated in with ``character id``. The result always
    evaluates back to ``value`` exactly.
    """
    parts = []
    for char in value:
        if char in _NAMED_ESCAPES:
            parts.append(_NAMED_ESCAPES[char])
        elif ord(char) < 0x20 or ord(char) == 0x7F:
            parts.append(f'" & (character id {ord(char)}) & "')
        else:
            parts.append(char)
    return "".join(parts)


def classify_host_failure(message: str, script: str | None = None) -> AppleScriptError:
    """Map an osascript failure message to a domain error.

    Messages matching an entry of ``HOST_FAILURE_PATTERNS`` become that
    entry's error; anything else is returned as a plain ``AppleScriptError``
    carrying the original text unchanged.
    """
    for pattern, error_class in HOST_FAILURE_PATTERNS:
        if pattern in message:
            logger.debug("osascript failure matched %r", pattern)
            return error_class(script=script)
    return AppleScriptError(message, script)


def _failure_message(returncode: int, stderr: str) -> str:
    return stderr.strip() or f"osascript exited with status {returncode}"


def run_applescript_file_sync(
    script_path: Path,
    *,
    osascript: str = "osascript",
    timeout: float | None = None,
) -> str:
    """
    Execute an AppleScript file and return its output.

    Args:
        script_path: Path to the AppleScript file.
        osascript: The scripting host executable.
        timeout: Maximum seconds to wait, or None to wait indefinitely.

    Returns:
        The stdout from the AppleScript execution.

    Raises:
        AfterEffectsMissingError: If the host could not address the application.
        AppleScriptTimeoutError: If the timeout expired.
        AppleScriptError: If the script failed for any other reason.
        OSError: If the host could not be started.
    """
    logger.debug("Running %s %s", osascript, script_path)
    try:
        result = subprocess.run(
            [osascript, str(script_path)],
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as e:
        raise AppleScriptTimeoutError(
            f"AppleScript timed out after {timeout}s", str(script_path)
        ) from e

    if result.returncode != 0:
        raise classify_host_failure(
            _failure_message(result.returncode, result.stderr), str(script_path)
        )

    return result.stdout.strip()


async def run_applescript_file(
    script_path: Path,
    *,
    osascript: str = "osascript",
    timeout: float | None = None,
) -> str:
    """
    Execute an AppleScript file without blocking the event loop.

    Same contract as ``run_applescript_file_sync``. The child process is
    killed if the call times out or is cancelled.
    """
    logger.debug("Running %s %s", osascript, script_path)
    proc = await asyncio.create_subprocess_exec(
        osascript,
        str(script_path),
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    try:
        async with asyncio.timeout(timeout):
            stdout, stderr = await proc.communicate()
    except TimeoutError as e:
        raise AppleScriptTimeoutError(
            f"AppleScript timed out after {timeout}s", str(script_path)
        ) from e
    finally:
        if proc.returncode is None:
            try:
                proc.kill()
            except ProcessLookupError:
                pass
            await proc.wait()

    if proc.returncode != 0:
        raise classify_host_failure(
            _failure_message(proc.returncode, stderr.decode(errors="replace")),
            str(script_path),
        )

    return stdout.decode(errors="replace").strip()
