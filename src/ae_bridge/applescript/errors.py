"""AppleScript error classes for the After Effects bridge."""

from typing import Any


class AppleScriptError(Exception):
    """Raised when an AppleScript command fails."""

    def __init__(self, message: str, script: str | None = None) -> None:
        super().__init__(message)
        self.script = script


class AppleScriptTimeoutError(AppleScriptError):
    """Raised when osascript does not finish within the configured timeout."""


class AfterEffectsMissingError(AppleScriptError):
    """Raised when After Effects is not installed or could not be addressed."""

    def __init__(self, script: str | None = None) -> None:
        super().__init__(
            "Could not find Adobe After Effects. Make sure it is installed "
            "and that the program directory is correct.",
            script=script,
        )


class ScriptFileCreationError(AppleScriptError):
    """Raised when the AppleScript file could not be written to disk."""

    def __init__(self, message: str | None = None, script: str | None = None) -> None:
        text = "Could not create AppleScript file for After Effects execution"
        super().__init__(f"{text}: {message}" if message else f"{text}.", script=script)


class NoResultError(AppleScriptError):
    """Raised when After Effects did not produce a readable result file."""

    def __init__(self, message: str | None = None) -> None:
        text = "After Effects did not produce a result"
        super().__init__(f"{text}: {message}" if message else f"{text}.")


class AfterEffectsScriptError(AppleScriptError):
    """Raised when the script running inside After Effects reported an error."""

    def __init__(self, error: Any) -> None:
        super().__init__(f"After Effects script error: {error}")
        self.error = error


class RenderEngineUnsupportedError(AppleScriptError):
    """Raised when a script is addressed to the After Effects Render Engine."""

    def __init__(self, app_path: str | None = None) -> None:
        super().__init__(
            "Activating the After Effects Render Engine is not supported. "
            "It cannot be sent tell blocks from AppleScript like the regular "
            "application can.",
            script=None,
        )
        self.app_path = app_path
