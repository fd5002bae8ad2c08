"""Read the result envelope a script wrote from inside After Effects.

Scripts report back by writing a JSON object to the result path::

    {"error": null, "logs": ["first line", "second line"], "result": 42}

Every key is optional. An ``error`` that is truthy in JavaScript terms means
the script failed.
"""

import asyncio
import logging
from pathlib import Path
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ae_bridge.applescript import AfterEffectsScriptError, NoResultError

logger = logging.getLogger(__name__)

LogSink = Callable[..., None]


class ResultEnvelope(BaseModel):
    """Structured output of a script run inside After Effects."""

    model_config = ConfigDict(extra="ignore")

    error: Any = Field(default=None, description="Error reported by the script")
    logs: list[Any] | None = Field(default=None, description="Lines the script logged")
    result: Any = Field(default=None, description="Value returned by the script")


def consume_result_file(path: Path) -> ResultEnvelope:
    """Read and validate the result file, then delete it.

    The file is gone once this returns, so a result can only be read once.

    Raises:
        NoResultError: If the file is missing or its content is malformed.
    """
    try:
        raw = path.read_bytes()
        path.unlink(missing_ok=True)
        return ResultEnvelope.model_validate_json(raw)
    except (OSError, ValidationError) as e:
        raise NoResultError(str(e)) from e


def reports_error(error: Any) -> bool:
    """Whether an envelope's error counts as set.

    Follows JavaScript truthiness, so empty objects and arrays (an Error
    serialized to JSON comes out as ``{}``) still count as errors.
    """
    if isinstance(error, bool):
        return error
    return error not in (None, 0, "")


def unpack_envelope(envelope: ResultEnvelope, log_sink: LogSink) -> Any:
    """Forward logged lines to ``log_sink`` and return the result.

    Raises:
        AfterEffectsScriptError: If the envelope carries an error.
    """
    if envelope.logs:
        log_sink(*envelope.logs)

    if reports_error(envelope.error):
        raise AfterEffectsScriptError(envelope.error)

    return envelope.result


def parse_results(result_path: Path | None, log_sink: LogSink) -> Any:
    """
    Load the result After Effects wrote and return its payload.

    Args:
        result_path: Where the script wrote its result, or None if the
            script returns nothing.
        log_sink: Called with every line the script logged.

    Returns:
        The script's result, or None when there is no result path.

    Raises:
        NoResultError: If the result could not be loaded.
        AfterEffectsScriptError: If the script reported an error.
    """
    if result_path is None:
        return None

    envelope = consume_result_file(Path(result_path))
    logger.debug("Loaded result from %s", result_path)
    return unpack_envelope(envelope, log_sink)


async def parse_results_async(result_path: Path | None, log_sink: LogSink) -> Any:
    """Async form of ``parse_results``; the file read runs in a worker thread."""
    if result_path is None:
        return None

    envelope = await asyncio.to_thread(consume_result_file, Path(result_path))
    logger.debug("Loaded result from %s", result_path)
    return unpack_envelope(envelope, log_sink)
