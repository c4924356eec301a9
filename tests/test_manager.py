from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import oci
import pytest

from services.oracle.instance_manager.errors import ConfigurationError, DomainListError
from services.oracle.instance_manager.manager import OCIInstanceManager, build_launch_details
from services.oracle.instance_manager.models import AvailabilityDomain, LaunchSpec


def _spec(domain: str | None = "Uocm:EU-FRANKFURT-1-AD-1") -> LaunchSpec:
    return LaunchSpec(
        compartment_id="ocid1.compartment.oc1..c",
        shape="VM.Standard.A1.Flex",
        ocpus=4,
        memory_in_gbs=24,
        display_name="myOciInstance",
        image_id="ocid1.image.oc1..i",
        subnet_id="ocid1.subnet.oc1..s",
        ssh_public_key="ssh-ed25519 AAAA",
        availability_domain=domain,
    )


class FakeIdentityClient:
    def __init__(self, names: list[str] | None = None, error: Exception | None = None) -> None:
        self.names = names or []
        self.error = error
        self.calls: list[str] = []

    def list_availability_domains(self, compartment_id: str):
        self.calls.append(compartment_id)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(data=[SimpleNamespace(name=name) for name in self.names])


class FakeComputeClient:
    def __init__(self) -> None:
        self.requests: list[tuple[object, dict]] = []

    def launch_instance(self, details, **kwargs):
        self.requests.append((details, kwargs))
        return SimpleNamespace(
            data=SimpleNamespace(
                id="ocid1.instance.oc1..new",
                display_name=details.display_name,
                lifecycle_state="PROVISIONING",
                availability_domain=details.availability_domain,
            )
        )


def _manager(identity=None, compute=None) -> OCIInstanceManager:
    return OCIInstanceManager(
        compute_client=compute or FakeComputeClient(),
        identity_client=identity or FakeIdentityClient(),
    )


def test_build_launch_details_maps_spec() -> None:
    details = build_launch_details(_spec())

    assert isinstance(details, oci.core.models.LaunchInstanceDetails)
    assert details.availability_domain == "Uocm:EU-FRANKFURT-1-AD-1"
    assert details.shape_config.ocpus == 4
    assert details.shape_config.memory_in_gbs == 24
    assert details.source_details.image_id == "ocid1.image.oc1..i"
    assert details.create_vnic_details.subnet_id == "ocid1.subnet.oc1..s"
    assert details.create_vnic_details.assign_public_ip is True
    assert details.metadata == {"ssh_authorized_keys": "ssh-ed25519 AAAA"}


def test_build_launch_details_requires_domain() -> None:
    with pytest.raises(ValueError):
        build_launch_details(_spec(domain=None))


def test_list_availability_domains_preserves_order() -> None:
    identity = FakeIdentityClient(["AD-2", "AD-1", "AD-3"])

    domains = _manager(identity=identity).list_availability_domains("ocid1.compartment.oc1..c")

    assert domains == [AvailabilityDomain("AD-2"), AvailabilityDomain("AD-1"), AvailabilityDomain("AD-3")]
    assert identity.calls == ["ocid1.compartment.oc1..c"]


def test_list_failure_raised_as_domain_list_error() -> None:
    cause = ConnectionError("connection reset")
    manager = _manager(identity=FakeIdentityClient(error=cause))

    with pytest.raises(DomainListError) as excinfo:
        manager.list_availability_domains("ocid1.compartment.oc1..c")

    assert excinfo.value.__cause__ is cause


def test_launch_instance_disables_sdk_retries() -> None:
    compute = FakeComputeClient()

    instance = _manager(compute=compute).launch_instance(_spec())

    details, kwargs = compute.requests[0]
    assert isinstance(kwargs["retry_strategy"], oci.retry.NoneRetryStrategy)
    assert details.display_name == "myOciInstance"
    assert instance.id == "ocid1.instance.oc1..new"
    assert instance.availability_domain == "Uocm:EU-FRANKFURT-1-AD-1"


def test_launch_service_error_propagates() -> None:
    class RejectingCompute:
        def launch_instance(self, details, **kwargs):
            raise oci.exceptions.ServiceError(500, "InternalError", {}, "Out of host capacity.")

    with pytest.raises(oci.exceptions.ServiceError):
        _manager(compute=RejectingCompute()).launch_instance(_spec())


def test_missing_oci_config_file_is_configuration_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError):
        OCIInstanceManager(config_file=str(tmp_path / "missing-config"))


def test_timeout_applied_as_connect_and_read() -> None:
    manager = OCIInstanceManager(
        timeout_seconds=30,
        compute_client=FakeComputeClient(),
        identity_client=FakeIdentityClient(),
    )

    assert manager.timeout == (10, 30)
