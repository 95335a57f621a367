"""User configuration stored as ``key=value`` lines in ``~/.biblia/config``."""

import logging
import os
from pathlib import Path
from typing import Callable, Optional, Union

from .strongs import DEFAULT_DATA_DIR
from .transliteration import DEFAULT_SCHEME, Scheme, Script

logger = logging.getLogger(__name__)


# =============================================================================
# Configuration
# =============================================================================

CONFIG_DIR = Path.home() / ".biblia"
CONFIG_FILE = CONFIG_DIR / "config"
CONFIG_ENV_VAR = "BIBLIA_CONFIG"

CONFIG_KEYS = ["scheme", "greek_scheme", "hebrew_scheme", "data_dir"]


class ConfigurationError(ValueError):
    """Raised when a configuration value is invalid."""


def get_configuration_path() -> Path:
    """Path of the config file; ``$BIBLIA_CONFIG`` overrides the default."""
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else CONFIG_FILE


def read_configuration(path: Optional[Union[str, Path]] = None) -> dict[str, str]:
    """
    Read the configuration file.

    Blank lines and lines starting with '#' are ignored. Values may contain '='.

    Args:
        path: Config file (default: get_configuration_path())

    Returns:
        Key/value pairs, empty if the file does not exist
    """
    path = Path(path) if path else get_configuration_path()
    if not path.exists():
        return {}

    configuration = {}
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue

            key, sep, value = line.partition("=")
            if key.strip() and sep:
                configuration[key.strip()] = value.strip()

    return configuration


def write_configuration(
    configuration: dict[str, str], path: Optional[Union[str, Path]] = None
):
    """Write the configuration file, creating its directory if needed."""
    path = Path(path) if path else get_configuration_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    lines = [f"{key}={value}" for key, value in configuration.items()]
    with open(path, "w", encoding="utf-8") as f:
        f.write("\n".join(lines) + "\n")

    logger.debug("Wrote configuration to %s", path)


def get_configuration_value(
    key: str, path: Optional[Union[str, Path]] = None
) -> Optional[str]:
    return read_configuration(path).get(key)


def set_configuration_value(
    key: str, value: str, path: Optional[Union[str, Path]] = None
):
    configuration = read_configuration(path)
    configuration[key] = value
    write_configuration(configuration, path)


# =============================================================================
# Typed Accessors
# =============================================================================

def _scheme(configuration: dict[str, str], key: str, default: Scheme) -> Scheme:
    value = configuration.get(key)
    if not value:
        return default
    try:
        return Scheme.from_name(value)
    except ValueError as e:
        raise ConfigurationError(f"Invalid value for '{key}': {e}") from e


def schemes_from_configuration(configuration: dict[str, str]) -> dict[Script, Scheme]:
    """
    Pick the scheme of each script.

    ``greek_scheme``/``hebrew_scheme`` win over ``scheme``, which wins over
    the built-in default.

    Raises:
        ConfigurationError: If a scheme name is not known
    """
    default = _scheme(configuration, "scheme", DEFAULT_SCHEME)
    return {
        Script.GREEK: _scheme(configuration, "greek_scheme", default),
        Script.HEBREW: _scheme(configuration, "hebrew_scheme", default),
    }


def data_dir_from_configuration(configuration: dict[str, str]) -> Path:
    return Path(configuration.get("data_dir") or DEFAULT_DATA_DIR).expanduser()


# =============================================================================
# Interactive
# =============================================================================

def interactive_configure(
    path: Optional[Union[str, Path]] = None,
    prompt: Callable[[str], str] = input,
):
    """Prompt for each known key; an empty answer keeps the current value."""
    configuration = read_configuration(path)

    print("Interactive Configuration")
    print("=" * 25)
    print("Press Enter to keep current value or type new value.\n")

    for key in CONFIG_KEYS:
        current = configuration.get(key) or "(not set)"
        answer = prompt(f"{key} [{current}]: ").strip()
        if answer:
            configuration[key] = answer

    # Fail before writing anything unusable
    schemes_from_configuration(configuration)

    write_configuration(configuration, path)
    print("\n✅ Configuration saved!")
