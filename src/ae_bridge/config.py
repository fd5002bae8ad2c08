"""Application configuration management."""

import tempfile
from pathlib import Path

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CONFIG_DIR = Path.home() / ".config" / "ae-bridge"


class Settings(BaseSettings):
    """Bridge settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="AE_BRIDGE_",
        env_file=[
            ".env",  # Project-level defaults (lower priority)
            DEFAULT_CONFIG_DIR / ".env",  # User config (higher priority)
        ],
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # After Effects discovery
    program_dir: Path = Field(
        default=Path("/Applications"),
        description="Directory searched for the After Effects application bundle",
    )
    render_engine: bool = Field(
        default=False, description="Target the After Effects Render Engine bundle"
    )

    # Script execution
    script_dir: Path = Field(
        default_factory=lambda: Path(tempfile.gettempdir()),
        description="Directory for generated AppleScript files",
    )
    osascript: str = Field(
        default="osascript", description="AppleScript host executable"
    )
    timeout: float | None = Field(
        default=None,
        gt=0,
        description="Seconds to wait for osascript (None waits indefinitely)",
    )

    # Paths
    config_dir: Path = Field(
        default=DEFAULT_CONFIG_DIR, description="Configuration directory"
    )
    config_file: str = Field(default="config.yaml", description="Config filename")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_dir: Path = Field(
        default=Path.home() / "Library" / "Logs",
        description="Directory for log files",
    )
    log_rotation_size_mb: int = Field(
        default=5, ge=1, description="Max size per log file in MB before rotation"
    )
    log_backup_count: int = Field(
        default=3, ge=0, description="Number of rotated log files to keep"
    )

    @property
    def config_path(self) -> Path:
        """Full path to the YAML config file."""
        return self.config_dir / self.config_file

    def ensure_config_dir(self) -> None:
        """Create config directory if it doesn't exist."""
        self.config_dir.mkdir(parents=True, exist_ok=True)


def load_settings(path: Path | None = None) -> Settings:
    """Load settings, overlaying values from a YAML file if it exists.

    Values from the file take precedence over environment variables.
    """
    if path is None:
        path = Settings().config_path

    if not path.exists():
        return Settings()

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return Settings(**data)
