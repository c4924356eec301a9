"""
OCI Compute Instance Manager.

Thin adapter over the ``oci`` SDK exposing the two remote operations the
launcher needs: listing availability domains and launching an instance.

Example:
    >>> from services.oracle.instance_manager import OCIInstanceManager
    >>> manager = OCIInstanceManager()
    >>> domains = manager.list_availability_domains("ocid1.compartment.oc1..xxx")
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

import oci

from services.oracle.instance_manager.constants import (
    DEFAULT_CONFIG_PROFILE,
    DEFAULT_CONNECT_TIMEOUT_SECONDS,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
)
from services.oracle.instance_manager.errors import ConfigurationError, DomainListError
from services.oracle.instance_manager.models import (
    AvailabilityDomain,
    LaunchedInstance,
    LaunchSpec,
)

logger = logging.getLogger(__name__)


class ComputeProvider(Protocol):
    """Remote compute service consumed by the launcher."""

    def list_availability_domains(self, compartment_id: str) -> list[AvailabilityDomain]: ...

    def launch_instance(self, spec: LaunchSpec) -> LaunchedInstance: ...


def build_launch_details(spec: LaunchSpec) -> oci.core.models.LaunchInstanceDetails:
    """
    Build the SDK request model for a launch.

    Args:
        spec: Launch spec with ``availability_domain`` set.

    Returns:
        LaunchInstanceDetails ready for ``ComputeClient.launch_instance``.

    Raises:
        ValueError: If the spec has no availability domain.
    """
    if not spec.availability_domain:
        raise ValueError("LaunchSpec.availability_domain must be set before launching")

    return oci.core.models.LaunchInstanceDetails(
        compartment_id=spec.compartment_id,
        availability_domain=spec.availability_domain,
        display_name=spec.display_name,
        shape=spec.shape,
        shape_config=oci.core.models.LaunchInstanceShapeConfigDetails(
            ocpus=spec.ocpus,
            memory_in_gbs=spec.memory_in_gbs,
        ),
        source_details=oci.core.models.InstanceSourceViaImageDetails(
            source_type="image",
            image_id=spec.image_id,
        ),
        create_vnic_details=oci.core.models.CreateVnicDetails(
            subnet_id=spec.subnet_id,
            assign_public_ip=spec.assign_public_ip,
        ),
        metadata={"ssh_authorized_keys": spec.ssh_public_key},
    )


class OCIInstanceManager:
    """
    Manager class for OCI compute launches.

    Clients are created lazily from the OCI config file, or injected
    directly (tests, instance principals, custom signers).

    Attributes:
        timeout: ``(connect, read)`` timeout applied to every SDK call.

    Example:
        >>> manager = OCIInstanceManager(profile="DEFAULT")
        >>> instance = manager.launch_instance(spec.for_domain("Uocm:EU-FRANKFURT-1-AD-1"))
    """

    def __init__(
        self,
        config_file: str | None = None,
        profile: str | None = None,
        timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS,
        oci_config: dict[str, Any] | None = None,
        compute_client: Any | None = None,
        identity_client: Any | None = None,
    ) -> None:
        """
        Initialize the OCI instance manager.

        Args:
            config_file: Path to the OCI config file. Defaults to ``~/.oci/config``.
            profile: Profile name inside the config file. Defaults to ``DEFAULT``.
            timeout_seconds: Read timeout for SDK calls, in seconds.
            oci_config: Already loaded config dict; skips reading the file.
            compute_client: Pre-built ``ComputeClient``.
            identity_client: Pre-built ``IdentityClient``.

        Raises:
            ConfigurationError: If the config file is missing or invalid.
        """
        connect_timeout = min(DEFAULT_CONNECT_TIMEOUT_SECONDS, timeout_seconds)
        self.timeout = (connect_timeout, timeout_seconds)
        self._compute = compute_client
        self._identity = identity_client

        if compute_client is not None and identity_client is not None:
            self._oci_config = oci_config or {}
        else:
            self._oci_config = oci_config or self._load_config(config_file, profile)

        logger.info("OCIInstanceManager initialized")

    @staticmethod
    def _load_config(config_file: str | None, profile: str | None) -> dict[str, Any]:
        location = config_file or oci.config.DEFAULT_LOCATION
        profile_name = profile or DEFAULT_CONFIG_PROFILE
        try:
            config = oci.config.from_file(file_location=location, profile_name=profile_name)
            oci.config.validate_config(config)
        except oci.exceptions.ClientError as exc:
            raise ConfigurationError(
                f"Invalid OCI config {location} (profile {profile_name}): {exc}"
            ) from exc
        logger.debug("Loaded OCI config from %s profile=%s", location, profile_name)
        return config

    @property
    def compute(self) -> Any:
        """Lazily create the compute client."""
        if self._compute is None:
            self._compute = oci.core.ComputeClient(self._oci_config, timeout=self.timeout)
            logger.debug("ComputeClient initialized")
        return self._compute

    @property
    def identity(self) -> Any:
        """Lazily create the identity client."""
        if self._identity is None:
            self._identity = oci.identity.IdentityClient(self._oci_config, timeout=self.timeout)
            logger.debug("IdentityClient initialized")
        return self._identity

    def list_availability_domains(self, compartment_id: str) -> list[AvailabilityDomain]:
        """
        List availability domains visible to a compartment, in provider order.

        Args:
            compartment_id: Compartment (or tenancy) OCID.

        Returns:
            Availability domains as returned by the identity service.

        Raises:
            DomainListError: If the listing call fails for any reason.
        """
        try:
            response = self.identity.list_availability_domains(compartment_id=compartment_id)
        except Exception as exc:  # noqa: BLE001 - transport and service errors alike
            raise DomainListError(f"Failed to list availability domains: {exc}") from exc

        domains = [AvailabilityDomain.from_api_response(ad) for ad in response.data or []]
        logger.debug("Found %d availability domains", len(domains))
        return domains

    def launch_instance(self, spec: LaunchSpec) -> LaunchedInstance:
        """
        Launch an instance.

        The SDK's built-in retries are disabled so the caller owns backoff.
        Provider errors (``oci.exceptions.ServiceError``) propagate unchanged.

        Args:
            spec: Launch spec with ``availability_domain`` set.

        Returns:
            The created instance.
        """
        details = build_launch_details(spec)
        logger.debug(
            "Launching instance: shape=%s, domain=%s", spec.shape, spec.availability_domain
        )
        response = self.compute.launch_instance(
            details,
            retry_strategy=oci.retry.NoneRetryStrategy(),
        )
        return LaunchedInstance.from_api_response(response.data)
