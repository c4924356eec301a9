#!/usr/bin/env python3
"""
OCI Instance Launcher

Polls the availability domains of a compartment until a compute instance
is launched. Configured through environment variables or a .env file in
the working directory.
"""

from __future__ import annotations

import logging
import sys

from services.oracle.instance_manager import (
    DEFAULT_LOG_LEVEL,
    ConfigurationError,
    OCIInstanceManager,
    get_env,
    load_env_file,
)
from services.oracle.launcher import load_config, run_forever

logger = logging.getLogger("oci_launcher")

LOG_FORMAT = "[%(levelname)s] %(asctime)s - %(message)s"


def configure_logging(level: str | None = None) -> None:
    """
    Configure root logging.

    Unknown level names fall back to the default here; the configuration
    load that follows reports them once logging is in place.
    """
    name = (level or DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(name), int):
        name = DEFAULT_LOG_LEVEL
    logging.basicConfig(level=name, format=LOG_FORMAT)


def main() -> int:
    load_env_file()
    configure_logging(get_env("LOG_LEVEL"))

    try:
        config = load_config()
        manager = OCIInstanceManager(
            config_file=config.oci_config_file,
            profile=config.oci_profile,
            timeout_seconds=config.request_timeout_seconds,
        )
    except ConfigurationError as e:
        logger.error("%s", e)
        return 1

    try:
        run_forever(manager, config)
    except KeyboardInterrupt:
        logger.info("Interrupted, exiting")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
