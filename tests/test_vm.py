from __future__ import annotations

import subprocess
from typing import Any

import pytest

import askvm.host.vm as vm_mod
from askvm.common.errors import VmManagerNotFoundError, VmResolutionError

RUNNING = """\
Name:           primary
State:          Running
Snapshots:      0
IPv4:           192.168.64.5
                10.0.0.7
Release:        Ubuntu 24.04 LTS
"""


def _fake_run(stdout: str = "", stderr: str = "", returncode: int = 0, calls: list | None = None):
    def run(cmd: list[str], **kwargs: Any) -> subprocess.CompletedProcess:
        if calls is not None:
            calls.append(cmd)
        return subprocess.CompletedProcess(cmd, returncode, stdout=stdout, stderr=stderr)
    return run


def test_resolve_running_vm(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list = []
    monkeypatch.setattr(vm_mod.subprocess, "run", _fake_run(RUNNING, calls=calls))
    assert vm_mod.resolve_address("primary") == "192.168.64.5"
    assert calls == [["multipass", "info", "primary"]]


def test_unknown_vm(monkeypatch: pytest.MonkeyPatch) -> None:
    err = 'info failed: The following errors occurred:\ninstance "nope" does not exist\n'
    monkeypatch.setattr(vm_mod.subprocess, "run", _fake_run(stderr=err, returncode=2))
    with pytest.raises(VmResolutionError, match="does not exist"):
        vm_mod.resolve_address("nope")


def test_stopped_vm(monkeypatch: pytest.MonkeyPatch) -> None:
    out = "Name:           primary\nState:          Stopped\nIPv4:           --\n"
    monkeypatch.setattr(vm_mod.subprocess, "run", _fake_run(out))
    with pytest.raises(VmResolutionError, match="not running"):
        vm_mod.resolve_address("primary")


def test_no_address(monkeypatch: pytest.MonkeyPatch) -> None:
    out = "Name:           primary\nState:          Running\nIPv4:           N/A\n"
    monkeypatch.setattr(vm_mod.subprocess, "run", _fake_run(out))
    with pytest.raises(VmResolutionError, match="IP address"):
        vm_mod.resolve_address("primary")


def test_missing_vm_manager(monkeypatch: pytest.MonkeyPatch) -> None:
    def run(cmd: list[str], **kwargs: Any) -> None:
        raise FileNotFoundError(cmd[0])
    monkeypatch.setattr(vm_mod.subprocess, "run", run)
    with pytest.raises(VmManagerNotFoundError):
        vm_mod.resolve_address("primary")


def test_endpoint_url() -> None:
    assert vm_mod.endpoint_url("192.168.64.5", 11434) == "http://192.168.64.5:11434"
