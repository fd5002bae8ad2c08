"""AppleScript execution infrastructure for driving After Effects."""

from ae_bridge.applescript.base import (
    HOST_FAILURE_PATTERNS,
    classify_host_failure,
    escape_applescript_string,
    run_applescript_file,
    run_applescript_file_sync,
)
from ae_bridge.applescript.errors import (
    AfterEffectsMissingError,
    AfterEffectsScriptError,
    AppleScriptError,
    AppleScriptTimeoutError,
    NoResultError,
    RenderEngineUnsupportedError,
    ScriptFileCreationError,
)

__all__ = [
    "HOST_FAILURE_PATTERNS",
    "classify_host_failure",
    "escape_applescript_string",
    "run_applescript_file",
    "run_applescript_file_sync",
    "AppleScriptError",
    "AppleScriptTimeoutError",
    "AfterEffectsMissingError",
    "AfterEffectsScriptError",
    "NoResultError",
    "RenderEngineUnsupportedError",
    "ScriptFileCreationError",
]
