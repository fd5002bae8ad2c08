"""Run ExtendScript inside Adobe After Effects from Python on macOS."""

__version__ = "0.1.0"

from ae_bridge.applescript import (
    AfterEffectsMissingError,
    AfterEffectsScriptError,
    AppleScriptError,
    AppleScriptTimeoutError,
    NoResultError,
    RenderEngineUnsupportedError,
    ScriptFileCreationError,
)
from ae_bridge.bridge import AdobifiedProgram, AfterEffects, raw_script
from ae_bridge.config import Settings, load_settings
from ae_bridge.locator import ApplicationHandle

__all__ = [
    "__version__",
    "AfterEffects",
    "AdobifiedProgram",
    "ApplicationHandle",
    "Settings",
    "load_settings",
    "raw_script",
    "AppleScriptError",
    "AppleScriptTimeoutError",
    "AfterEffectsMissingError",
    "AfterEffectsScriptError",
    "NoResultError",
    "RenderEngineUnsupportedError",
    "ScriptFileCreationError",
]
