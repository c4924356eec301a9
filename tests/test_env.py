from __future__ import annotations

import os
from pathlib import Path

import pytest

from services.oracle.instance_manager.env import (
    get_env_bool,
    get_env_float,
    get_env_int,
    get_env_log_level,
    load_env_file,
)


def test_load_env_file_does_not_override(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("OCI_SHAPE=VM.Standard.E4.Flex\nDISPLAY_NAME=from-file\n", encoding="utf-8")
    monkeypatch.setenv("DISPLAY_NAME", "from-env")
    monkeypatch.delenv("OCI_SHAPE", raising=False)

    assert load_env_file(env_file) is True

    assert os.environ["OCI_SHAPE"] == "VM.Standard.E4.Flex"
    assert os.environ["DISPLAY_NAME"] == "from-env"
    monkeypatch.delenv("OCI_SHAPE")


def test_load_env_file_missing(tmp_path: Path) -> None:
    assert load_env_file(tmp_path / ".env") is False


def test_get_env_int_and_bool(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MAX_BACKOFF_ATTEMPTS", "7")
    monkeypatch.setenv("STOP_ON_SUCCESS", "maybe")

    assert get_env_int("MAX_BACKOFF_ATTEMPTS", 5) == 7
    assert get_env_bool("STOP_ON_SUCCESS", False) is False
    monkeypatch.setenv("STOP_ON_SUCCESS", "On")
    assert get_env_bool("STOP_ON_SUCCESS", False) is True


def test_blank_numeric_setting_uses_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OCI_OCPUS", "   ")
    monkeypatch.setenv("RETRY_WAIT_SECONDS", " 30 ")

    assert get_env_float("OCI_OCPUS", 4.0) == 4.0
    assert get_env_int("RETRY_WAIT_SECONDS", 64) == 30


def test_get_env_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "warning")
    assert get_env_log_level("LOG_LEVEL", "INFO") == "WARNING"

    monkeypatch.setenv("LOG_LEVEL", "loud")
    assert get_env_log_level("LOG_LEVEL", "INFO") == "INFO"
