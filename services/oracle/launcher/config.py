from __future__ import annotations

import logging
from dataclasses import dataclass

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
)
from services.oracle.instance_manager.env import (
    get_env,
    get_env_bool,
    get_env_float,
    get_env_int,
    get_env_log_level,
)
from services.oracle.instance_manager.errors import ConfigurationError
from services.oracle.instance_manager.models import LaunchSpec
from services.oracle.launcher.strategy import DOMAIN_POLICIES, SEQUENTIAL_POLICY

logger = logging.getLogger("oci_launcher")

REQUIRED_SETTINGS = (
    "OCI_IMAGE_ID",
    "OCI_COMPARTMENT_ID",
    "OCI_SUBNET_ID",
    "SSH_KEY_PUB",
)

OPTIONAL_SETTINGS = (
    "AD_REQ_INTERVAL_SECONDS",
    "RETRY_WAIT_SECONDS",
    "LONG_WAIT_MINUTES",
    "INITIAL_BACKOFF_DELAY_SECONDS",
    "MAX_BACKOFF_ATTEMPTS",
    "DISPLAY_NAME",
    "OCI_SHAPE",
    "OCI_OCPUS",
    "OCI_MEMORY_IN_GBS",
    "DOMAIN_POLICY",
    "STOP_ON_SUCCESS",
    "OCI_REQUEST_TIMEOUT_SECONDS",
    "OCI_CONFIG_FILE",
    "OCI_CONFIG_PROFILE",
    "LOG_LEVEL",
)


def _is_unset(value: str | None) -> bool:
    return value is None or not value.strip()


def check_env_variables(keys: tuple[str, ...], optional: bool = False) -> list[str]:
    """
    Log the value of each setting and report the unset ones.

    Args:
        keys: Environment variable names to check.
        optional: Unset optional settings only log a warning.

    Returns:
        Names of the unset settings.

    Raises:
        ConfigurationError: If a required setting is unset.
    """
    logger.info("Checking %s environment variables...", "optional" if optional else "required")
    missing: list[str] = []
    for key in keys:
        value = get_env(key)
        logger.info("%s=%s", key, value)
        if _is_unset(value):
            missing.append(key)
            if optional:
                logger.warning(
                    "%s is not set in environment variables, default value will be used", key
                )

    if missing and not optional:
        raise ConfigurationError(
            f"{', '.join(missing)} not set in environment variables"
        )
    logger.info("Done")
    return missing


@dataclass(frozen=True)
class LauncherConfig:
    """
    Settings for the launch loop, read once at startup.

    Attributes:
        image_id: Boot image OCID (``OCI_IMAGE_ID``).
        compartment_id: Compartment OCID (``OCI_COMPARTMENT_ID``).
        subnet_id: Subnet OCID (``OCI_SUBNET_ID``).
        ssh_public_key: Authorized SSH public key (``SSH_KEY_PUB``).
        display_name: Instance display name.
        shape: Compute shape.
        ocpus: OCPUs for flexible shapes.
        memory_in_gbs: Memory for flexible shapes.
        ad_req_interval_seconds: Pacing between domains.
        retry_wait_seconds: Wait between cycles.
        long_wait_minutes: Rate-limit wait of the single-pass policy.
        initial_backoff_delay_seconds: First backoff delay of the sequential policy.
        max_backoff_attempts: Attempts per domain of the sequential policy.
        domain_policy: "sequential" or "single-pass".
        stop_on_success: Exit the loop after the first launched instance.
        request_timeout_seconds: Read timeout for SDK calls.
        oci_config_file: OCI config file path; SDK default when None.
        oci_profile: Profile inside the OCI config file.
        log_level: Root logging level name.
    """

    image_id: str
    compartment_id: str
    subnet_id: str
    ssh_public_key: str
    display_name: str = DEFAULT_DISPLAY_NAME
    shape: str = DEFAULT_SHAPE
    ocpus: float = DEFAULT_OCPUS
    memory_in_gbs: float = DEFAULT_MEMORY_IN_GBS
    ad_req_interval_seconds: int = DEFAULT_AD_REQ_INTERVAL_SECONDS
    retry_wait_seconds: int = DEFAULT_RETRY_WAIT_SECONDS
    long_wait_minutes: int = DEFAULT_LONG_WAIT_MINUTES
    initial_backoff_delay_seconds: int = DEFAULT_INITIAL_BACKOFF_DELAY_SECONDS
    max_backoff_attempts: int = DEFAULT_MAX_BACKOFF_ATTEMPTS
    domain_policy: str = SEQUENTIAL_POLICY
    stop_on_success: bool = False
    request_timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS
    oci_config_file: str | None = None
    oci_profile: str = DEFAULT_CONFIG_PROFILE
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        for name in (
            "ad_req_interval_seconds",
            "retry_wait_seconds",
            "long_wait_minutes",
            "initial_backoff_delay_seconds",
        ):
            if getattr(self, name) < 0:
                raise ConfigurationError(f"{name} must be non-negative, got {getattr(self, name)}")
        if self.max_backoff_attempts < 1:
            raise ConfigurationError(
                f"max_backoff_attempts must be at least 1, got {self.max_backoff_attempts}"
            )
        if self.ocpus <= 0 or self.memory_in_gbs <= 0:
            raise ConfigurationError(
                f"ocpus and memory_in_gbs must be positive, got {self.ocpus}/{self.memory_in_gbs}"
            )
        if self.request_timeout_seconds <= 0:
            raise ConfigurationError(
                f"request_timeout_seconds must be positive, got {self.request_timeout_seconds}"
            )
        if self.domain_policy not in DOMAIN_POLICIES:
            raise ConfigurationError(
                f"Unknown domain policy {self.domain_policy!r}; expected one of {DOMAIN_POLICIES}"
            )
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ConfigurationError(f"Unknown log level {self.log_level!r}")

    @classmethod
    def from_env(cls) -> LauncherConfig:
        """
        Build the configuration from environment variables.

        Raises:
            ConfigurationError: If a required setting is unset or a value is invalid.
        """
        missing = [key for key in REQUIRED_SETTINGS if _is_unset(get_env(key))]
        if missing:
            raise ConfigurationError(f"{', '.join(missing)} not set in environment variables")

        return cls(
            image_id=get_env("OCI_IMAGE_ID").strip(),
            compartment_id=get_env("OCI_COMPARTMENT_ID").strip(),
            subnet_id=get_env("OCI_SUBNET_ID").strip(),
            ssh_public_key=get_env("SSH_KEY_PUB").strip(),
            display_name=get_env("DISPLAY_NAME") or DEFAULT_DISPLAY_NAME,
            shape=get_env("OCI_SHAPE") or DEFAULT_SHAPE,
            ocpus=get_env_float("OCI_OCPUS", DEFAULT_OCPUS),
            memory_in_gbs=get_env_float("OCI_MEMORY_IN_GBS", DEFAULT_MEMORY_IN_GBS),
            ad_req_interval_seconds=get_env_int(
                "AD_REQ_INTERVAL_SECONDS", DEFAULT_AD_REQ_INTERVAL_SECONDS
            ),
            retry_wait_seconds=get_env_int("RETRY_WAIT_SECONDS", DEFAULT_RETRY_WAIT_SECONDS),
            long_wait_minutes=get_env_int("LONG_WAIT_MINUTES", DEFAULT_LONG_WAIT_MINUTES),
            initial_backoff_delay_seconds=get_env_int(
                "INITIAL_BACKOFF_DELAY_SECONDS", DEFAULT_INITIAL_BACKOFF_DELAY_SECONDS
            ),
            max_backoff_attempts=get_env_int("MAX_BACKOFF_ATTEMPTS", DEFAULT_MAX_BACKOFF_ATTEMPTS),
            domain_policy=(get_env("DOMAIN_POLICY") or SEQUENTIAL_POLICY).strip().lower(),
            stop_on_success=get_env_bool("STOP_ON_SUCCESS", False),
            request_timeout_seconds=get_env_float(
                "OCI_REQUEST_TIMEOUT_SECONDS", DEFAULT_REQUEST_TIMEOUT_SECONDS
            ),
            oci_config_file=get_env("OCI_CONFIG_FILE") or None,
            oci_profile=get_env("OCI_CONFIG_PROFILE") or DEFAULT_CONFIG_PROFILE,
            log_level=get_env_log_level("LOG_LEVEL", DEFAULT_LOG_LEVEL),
        )

    def launch_spec(self) -> LaunchSpec:
        """Instance template shared by every attempt."""
        return LaunchSpec(
            compartment_id=self.compartment_id,
            shape=self.shape,
            ocpus=self.ocpus,
            memory_in_gbs=self.memory_in_gbs,
            display_name=self.display_name,
            image_id=self.image_id,
            subnet_id=self.subnet_id,
            ssh_public_key=self.ssh_public_key,
        )


def load_config() -> LauncherConfig:
    """
    Report every recognized setting, then build the configuration.

    Required settings are checked first so a missing one fails before any
    other work happens.

    Raises:
        ConfigurationError: If a required setting is unset or a value is invalid.
    """
    check_env_variables(REQUIRED_SETTINGS)
    check_env_variables(OPTIONAL_SETTINGS, optional=True)
    return LauncherConfig.from_env()
