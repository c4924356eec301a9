from __future__ import annotations

from services.oracle.instance_manager.constants import (
    DEFAULT_AD_REQ_INTERVAL_SECONDS,
    DEFAULT_CONFIG_PROFILE,
    DEFAULT_DISPLAY_NAME,
    DEFAULT_INITIAL_BACKOFF_DELAY_SECONDS,
    DEFAULT_LOG_LEVEL,
    DEFAULT_LONG_WAIT_MINUTES,
    DEFAULT_MAX_BACKOFF_ATTEMPTS,
    DEFAULT_MEMORY_IN_GBS,
    DEFAULT_OCPUS,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    DEFAULT_RETRY_WAIT_SECONDS,
    DEFAULT_SHAPE,
    OUT_OF_HOST_CAPACITY_MESSAGE,
    TOO_MANY_REQUESTS_CODE,
    TOO_MANY_REQUESTS_STATUS,
)
from services.oracle.instance_manager.env import (
    get_env,
    get_env_bool,
    get_env_float,
    get_env_int,
    get_env_log_level,
    load_env_file,
)
from services.oracle.instance_manager.errors import (
    ConfigurationError,
    DomainListError,
    OCILauncherError,
)
from services.oracle.instance_manager.manager import (
    ComputeProvider,
    OCIInstanceManager,
    build_launch_details,
)
from services.oracle.instance_manager.models import (
    AvailabilityDomain,
    LaunchedInstance,
    LaunchSpec,
)

__all__ = [
    "DEFAULT_DISPLAY_NAME",
    "DEFAULT_SHAPE",
    "DEFAULT_OCPUS",
    "DEFAULT_MEMORY_IN_GBS",
    "DEFAULT_AD_REQ_INTERVAL_SECONDS",
    "DEFAULT_RETRY_WAIT_SECONDS",
    "DEFAULT_LONG_WAIT_MINUTES",
    "DEFAULT_INITIAL_BACKOFF_DELAY_SECONDS",
    "DEFAULT_MAX_BACKOFF_ATTEMPTS",
    "DEFAULT_REQUEST_TIMEOUT_SECONDS",
    "DEFAULT_CONFIG_PROFILE",
    "DEFAULT_LOG_LEVEL",
    "TOO_MANY_REQUESTS_STATUS",
    "TOO_MANY_REQUESTS_CODE",
    "OUT_OF_HOST_CAPACITY_MESSAGE",
    "load_env_file",
    "get_env",
    "get_env_bool",
    "get_env_float",
    "get_env_int",
    "get_env_log_level",
    "AvailabilityDomain",
    "LaunchSpec",
    "LaunchedInstance",
    "ComputeProvider",
    "OCIInstanceManager",
    "build_launch_details",
    "OCILauncherError",
    "ConfigurationError",
    "DomainListError",
]
