"""Resolve the model server address of a Multipass VM.

Parses the text output of `multipass info <name>`:

    Name:           primary
    State:          Running
    IPv4:           192.168.64.2
"""
from __future__ import annotations
import logging
import re
import subprocess

from askvm.common.errors import VmManagerNotFoundError, VmResolutionError

LOGGER = logging.getLogger("askvm.host.vm")

IPV4_RE = re.compile(r"\b(?:\d{1,3}\.){3}\d{1,3}\b")

def _field(output: str, name: str) -> str | None:
    prefix = f"{name}:"
    for line in output.splitlines():
        stripped = line.strip()
        if stripped.startswith(prefix):
            return stripped[len(prefix):].strip()
    return None

def parse_address(output: str) -> str | None:
    """Return the first IPv4 token on the IPv4 line, if any."""
    ipv4 = _field(output, "IPv4")
    if not ipv4:
        return None
    m = IPV4_RE.search(ipv4)
    return m.group(0) if m else None

def resolve_address(vm_name: str, vm_command: str = "multipass") -> str:
    """
    Ask the VM manager for the VM's primary address.

    Args:
        vm_name: VM instance name.
        vm_command: VM manager executable.

    Raises:
        VmManagerNotFoundError: The VM manager is not installed.
        VmResolutionError: The VM is unknown, stopped, or has no address.
    """
    cmd = [vm_command, "info", vm_name]
    LOGGER.debug("Running %s", " ".join(cmd))
    try:
        proc = subprocess.run(cmd, capture_output=True, text=True, check=False)
    except FileNotFoundError as e:
        raise VmManagerNotFoundError(f"VM manager '{vm_command}' is not installed") from e

    if proc.returncode != 0:
        detail = (proc.stderr or proc.stdout).strip()
        LOGGER.info("%s info %s failed: %s", vm_command, vm_name, detail)
        raise VmResolutionError(f"VM '{vm_name}' not found: {detail or 'unknown error'}")

    state = _field(proc.stdout, "State")
    if state and state.lower() != "running":
        raise VmResolutionError(f"VM '{vm_name}' is not running (state: {state})")

    address = parse_address(proc.stdout)
    if address is None:
        raise VmResolutionError(f"Could not get IP address of VM '{vm_name}'")
    LOGGER.info("VM %s resolved to %s", vm_name, address)
    return address

def endpoint_url(address: str, port: int) -> str:
    """Base URL of the model server at address:port."""
    return f"http://{address}:{port}"
