from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))
sys.path.insert(0, str(Path(__file__).resolve().parent))

from services.oracle.launcher.config import LauncherConfig  # noqa: E402
from fakes import RecordingWaiter  # noqa: E402

REQUIRED_ENV = {
    "OCI_IMAGE_ID": "ocid1.image.oc1..image",
    "OCI_COMPARTMENT_ID": "ocid1.compartment.oc1..compartment",
    "OCI_SUBNET_ID": "ocid1.subnet.oc1..subnet",
    "SSH_KEY_PUB": "ssh-ed25519 AAAAC3Nza test@host",
}


@pytest.fixture()
def waits() -> RecordingWaiter:
    return RecordingWaiter()


@pytest.fixture()
def make_config():
    def _make(**overrides) -> LauncherConfig:
        values = {
            "image_id": REQUIRED_ENV["OCI_IMAGE_ID"],
            "compartment_id": REQUIRED_ENV["OCI_COMPARTMENT_ID"],
            "subnet_id": REQUIRED_ENV["OCI_SUBNET_ID"],
            "ssh_public_key": REQUIRED_ENV["SSH_KEY_PUB"],
        }
        values.update(overrides)
        return LauncherConfig(**values)

    return _make


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch):
    from services.oracle.launcher.config import OPTIONAL_SETTINGS, REQUIRED_SETTINGS

    for key in (*REQUIRED_SETTINGS, *OPTIONAL_SETTINGS):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


@pytest.fixture()
def required_env(clean_env: pytest.MonkeyPatch):
    for key, value in REQUIRED_ENV.items():
        clean_env.setenv(key, value)
    return clean_env
