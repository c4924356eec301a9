from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger("oci_launcher")

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def load_env_file(path: str | Path | None = None) -> bool:
    """
    Load environment variables from a .env file.

    Values already present in the environment are not overridden.

    Args:
        path: File to load. Defaults to ``.env`` in the working directory.

    Returns:
        True if a file was found and loaded.
    """
    env_path = Path(path) if path is not None else Path.cwd() / ".env"
    if not env_path.exists():
        logger.debug("No .env file at %s, using system environment variables", env_path)
        return False
    load_dotenv(env_path, override=False)
    logger.debug("Loaded environment from %s", env_path)
    return True


def get_env(key: str, default: str | None = None) -> str | None:
    """Raw value of a launcher setting such as ``OCI_COMPARTMENT_ID``, or ``default``."""
    return os.environ.get(key, default)


def get_env_float(key: str, default: float) -> float:
    """
    Read a fractional setting such as ``OCI_OCPUS`` or ``OCI_MEMORY_IN_GBS``.

    An unset or empty variable yields ``default``; an unparsable one logs a
    warning and yields ``default`` as well.
    """
    value = (os.environ.get(key) or "").strip()
    if not value:
        return default
    try:
        return float(value)
    except ValueError:
        logger.warning("Invalid float value for %s, using default: %s", key, default)
        return default


def get_env_int(key: str, default: int) -> int:
    """
    Read a whole-number setting such as ``RETRY_WAIT_SECONDS``.

    Falls back to ``default`` the same way as :func:`get_env_float`.
    """
    value = (os.environ.get(key) or "").strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning("Invalid int value for %s, using default: %s", key, default)
        return default


def get_env_bool(key: str, default: bool) -> bool:
    """Get environment variable as a boolean flag (1/0, true/false, yes/no, on/off)."""
    value = os.environ.get(key)
    if not value:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    logger.warning("Invalid bool value for %s, using default: %s", key, default)
    return default


def get_env_log_level(key: str, default: str) -> str:
    """Get a logging level name such as ``DEBUG``; unknown names fall back to ``default``."""
    value = os.environ.get(key)
    if not value or not value.strip():
        return default
    name = value.strip().upper()
    if not isinstance(logging.getLevelName(name), int):
        logger.warning("Invalid log level for %s, using default: %s", key, default)
        return default
    return name
