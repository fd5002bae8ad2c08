"""Run ExtendScript inside Adobe After Effects through osascript.

A call goes through four steps, always in this order:

1. locate the After Effects bundle under ``Settings.program_dir``
2. write an AppleScript that tells it to ``DoScript`` the program
3. run the AppleScript with osascript
4. read the result envelope the program wrote to its result path

``AfterEffects.execute_sync`` blocks for each step; ``AfterEffects.execute``
awaits them instead. Both return the same result or raise the same error.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable

from ae_bridge.applescript import (
    AfterEffectsMissingError,
    run_applescript_file,
    run_applescript_file_sync,
)
from ae_bridge.config import Settings
from ae_bridge.locator import find_after_effects, find_after_effects_sync
from ae_bridge.logging import forward_to_logger
from ae_bridge.results import LogSink, parse_results, parse_results_async
from ae_bridge.script import ScriptDocument, write_script, write_script_sync

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdobifiedProgram:
    """A program ready to run in After Effects."""

    body: str  # ExtendScript source
    result_path: Path | None  # where the program writes its result envelope


Transpiler = Callable[..., AdobifiedProgram]


def raw_script(
    settings: Settings,
    program: str,
    *args: Any,
    result_path: Path | None = None,
) -> AdobifiedProgram:
    """Pass-through transpiler for programs that are already ExtendScript.

    The program is responsible for writing its own result envelope to
    ``result_path`` if it has one.
    """
    if args:
        raise TypeError("raw_script does not accept program arguments")
    return AdobifiedProgram(body=program, result_path=result_path)


def execute_script_sync(
    document: ScriptDocument,
    result_path: Path | None,
    log_sink: LogSink,
    settings: Settings,
) -> Any:
    """Run a generated AppleScript and return the program's result."""
    run_applescript_file_sync(
        document.path, osascript=settings.osascript, timeout=settings.timeout
    )
    return parse_results(result_path, log_sink)


async def execute_script(
    document: ScriptDocument,
    result_path: Path | None,
    log_sink: LogSink,
    settings: Settings,
) -> Any:
    """Async form of ``execute_script_sync``."""
    await run_applescript_file(
        document.path, osascript=settings.osascript, timeout=settings.timeout
    )
    return await parse_results_async(result_path, log_sink)


class AfterEffects:
    """Entry point for running programs inside After Effects."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        transpiler: Transpiler = raw_script,
        log_sink: LogSink | None = None,
    ) -> None:
        """
        Args:
            settings: Bridge settings; loaded from the environment if omitted.
            transpiler: Turns ``(settings, program, *args)`` into an
                AdobifiedProgram.
            log_sink: Receives lines logged by programs. Defaults to the
                ``ae_bridge.aftereffects`` logger.
        """
        self.settings = settings or Settings()
        self.transpiler = transpiler
        self.log_sink = log_sink or forward_to_logger

    def execute_sync(self, program: Any, *args: Any) -> Any:
        """
        Run a program in After Effects and wait for its result.

        Returns:
            The program's result, or None if it has no result path.

        Raises:
            AfterEffectsMissingError: If After Effects can't be found or addressed.
            RenderEngineUnsupportedError: If the Render Engine was requested.
            ScriptFileCreationError: If the AppleScript file couldn't be written.
            NoResultError: If the program's result couldn't be read.
            AfterEffectsScriptError: If the program reported an error.
            AppleScriptError: For any other osascript failure.
        """
        settings = self.settings
        adobified = self.transpiler(settings, program, *args)

        app = find_after_effects_sync(settings.program_dir, settings.render_engine)
        if app is None:
            raise AfterEffectsMissingError()

        document = write_script_sync(adobified.body, app, settings.script_dir)
        logger.info("Executing %s in %s", document.path.name, app.path.name)
        return execute_script_sync(document, adobified.result_path, self.log_sink, settings)

    async def execute(self, program: Any, *args: Any) -> Any:
        """Async form of ``execute_sync``, with the same result and errors."""
        settings = self.settings
        adobified = self.transpiler(settings, program, *args)

        app = await find_after_effects(settings.program_dir, settings.render_engine)
        if app is None:
            raise AfterEffectsMissingError()

        document = await write_script(adobified.body, app, settings.script_dir)
        logger.info("Executing %s in %s", document.path.name, app.path.name)
        return await execute_script(document, adobified.result_path, self.log_sink, settings)

    def create_sync(self, program: Any, *args: Any) -> Any:
        """Not implemented on macOS."""
        logger.debug("create_sync called with %r %r", program, args)
        raise NotImplementedError("create_sync is not implemented on macOS")

    async def create(self, program: Any, *args: Any) -> Any:
        """Not implemented on macOS."""
        logger.debug("create called with %r %r", program, args)
        raise NotImplementedError("create is not implemented on macOS")
