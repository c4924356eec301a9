from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True)
class AvailabilityDomain:
    """An isolated location within a region where capacity may be available."""

    name: str

    @classmethod
    def from_api_response(cls, data: Any) -> AvailabilityDomain:
        return cls(name=data.name)


@dataclass(frozen=True)
class LaunchSpec:
    """
    Parameters describing the compute instance to create.

    The template is built once from configuration. Each attempt derives a
    copy with ``availability_domain`` set through :meth:`for_domain`.

    Attributes:
        compartment_id: OCID of the compartment that owns the instance.
        shape: Compute shape name (e.g., "VM.Standard.A1.Flex").
        ocpus: Number of OCPUs for flexible shapes.
        memory_in_gbs: Memory in GB for flexible shapes.
        display_name: Instance display name.
        image_id: OCID of the boot image.
        subnet_id: OCID of the subnet for the primary VNIC.
        ssh_public_key: Public key placed in ``ssh_authorized_keys``.
        assign_public_ip: Whether the primary VNIC gets a public IP.
        availability_domain: Target domain; unset on the template.
    """

    compartment_id: str
    shape: str
    ocpus: float
    memory_in_gbs: float
    display_name: str
    image_id: str
    subnet_id: str
    ssh_public_key: str
    assign_public_ip: bool = True
    availability_domain: str | None = None

    def for_domain(self, name: str) -> LaunchSpec:
        """Return a copy of this spec targeting the given availability domain."""
        return replace(self, availability_domain=name)


@dataclass(frozen=True)
class LaunchedInstance:
    """
    Identifying information about a created instance.

    Attributes:
        id: Instance OCID.
        display_name: Instance display name.
        lifecycle_state: State reported at creation (usually PROVISIONING).
        availability_domain: Domain the instance was placed in.
    """

    id: str
    display_name: str | None = None
    lifecycle_state: str | None = None
    availability_domain: str | None = None

    @classmethod
    def from_api_response(cls, data: Any) -> LaunchedInstance:
        """
        Create LaunchedInstance from an ``oci.core.models.Instance``.

        Args:
            data: Instance model returned by the launch call.

        Returns:
            LaunchedInstance object.
        """
        return cls(
            id=data.id,
            display_name=getattr(data, "display_name", None),
            lifecycle_state=getattr(data, "lifecycle_state", None),
            availability_domain=getattr(data, "availability_domain", None),
        )
