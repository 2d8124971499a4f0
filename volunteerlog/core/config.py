"""Configuration management for Volunteer Log.

Loads configuration from environment variables and .env file.
Provides validation and sensible defaults.

The volunteer data file is not configurable: it is always
VolunteerLog.csv in the working directory.

Usage:
    from volunteerlog.core.config import get_config, validate_config

    config = get_config()
    issues = validate_config(config)
    if issues:
        for issue in issues:
            print(f"Config issue: {issue}")
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

# Fixed data file, resolved against the working directory
DATA_FILE_NAME = "VolunteerLog.csv"

# Default values (defined once, used by both Config and load_config)
DEFAULT_LOG_PATH = Path.home() / ".volunteerlog" / "logs"
DEFAULT_ORGANIZATION = "Lopez Urban Farm"


@dataclass
class Config:
    """Application configuration.

    Attributes:
        log_path: Directory for log files
        organization_name: Shown in the thank-you message after logging hours
        debug: Enable debug logging on the console
    """

    log_path: Path = field(default_factory=lambda: DEFAULT_LOG_PATH)
    organization_name: str = DEFAULT_ORGANIZATION
    debug: bool = False

    @property
    def data_path(self) -> Path:
        """Volunteer file in the current working directory."""
        return Path.cwd() / DATA_FILE_NAME


def load_env_file(path: Path) -> dict[str, str]:
    """Parse .env file.

    Handles:
        - KEY=VALUE format
        - Comments (lines starting with #)
        - Blank lines
        - Quoted values

    Args:
        path: Path to .env file

    Returns:
        Dictionary of environment variables
    """
    env_vars: dict[str, str] = {}

    if not path.exists():
        return env_vars

    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()

            if not line or line.startswith("#"):
                continue

            if "=" in line:
                key, _, value = line.partition("=")
                key = key.strip()
                value = value.strip()

                if value and value[0] in ('"', "'") and value[-1] == value[0]:
                    value = value[1:-1]

                if key:
                    env_vars[key] = value

    return env_vars


def _get_path(key: str, default: Path, env_vars: dict[str, str]) -> Path:
    """Get path from environment, expanding ~ and resolving."""
    value = os.environ.get(key) or env_vars.get(key)
    if value:
        return Path(value).expanduser().resolve()
    return default


def _get_str(key: str, default: str, env_vars: dict[str, str]) -> str:
    """Get string from environment."""
    return os.environ.get(key) or env_vars.get(key) or default


def _get_bool(key: str, default: bool, env_vars: dict[str, str]) -> bool:
    """Get boolean from environment."""
    value = os.environ.get(key) or env_vars.get(key)
    if value is None:
        return default
    return value.lower() in ("true", "1", "yes", "on")


def load_config(env_file: Optional[Path] = None) -> Config:
    """Load configuration from environment and .env file.

    Priority:
        1. Environment variables (highest)
        2. .env file
        3. Default values (lowest)

    Args:
        env_file: Path to .env file. Defaults to .env in current directory.

    Returns:
        Loaded configuration
    """
    if env_file is None:
        env_file = Path.cwd() / ".env"

    env_vars = load_env_file(Path(env_file))

    return Config(
        log_path=_get_path("VOLUNTEERLOG_LOG_PATH", DEFAULT_LOG_PATH, env_vars),
        organization_name=_get_str("VOLUNTEERLOG_ORGANIZATION", DEFAULT_ORGANIZATION, env_vars),
        debug=_get_bool("VOLUNTEERLOG_DEBUG", False, env_vars),
    )


def validate_config(config: Config) -> list[str]:
    """Validate configuration.

    Checks:
        - Log directory exists or can be created, and is writable
        - Working directory is writable (the data file lives there)
        - Organization name is not blank

    Args:
        config: Configuration to validate

    Returns:
        List of issues (empty if valid)
    """
    issues: list[str] = []

    try:
        config.log_path.mkdir(parents=True, exist_ok=True)
        if not os.access(config.log_path, os.W_OK):
            issues.append(f"Log directory not writable: {config.log_path}")
    except OSError as e:
        issues.append(f"Cannot create log directory {config.log_path}: {e}")

    data_dir = config.data_path.parent
    if not os.access(data_dir, os.W_OK):
        issues.append(f"Working directory not writable, saving will fail: {data_dir}")

    if not config.organization_name.strip():
        issues.append("Organization name is blank")

    return issues


# Singleton config
_config: Optional[Config] = None


def get_config() -> Config:
    """Return cached configuration singleton.

    Loads configuration on first call, returns cached version thereafter.
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Reset cached configuration.

    Used primarily for testing.
    """
    global _config
    _config = None
