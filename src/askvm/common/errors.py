"""Error taxonomy. Every failure ends the invocation with exit status 1."""
from __future__ import annotations
from enum import IntEnum

class ExitStatus(IntEnum):
    OK = 0
    FAILURE = 1

TROUBLESHOOTING = """\
Checks:
  1. Is the VM running?  (multipass list)
  2. Is the model server reachable from the host?
     (it must listen on 0.0.0.0, e.g. OLLAMA_HOST=0.0.0.0)
  3. Is the model pulled inside the VM?  (ollama list)"""

class AskError(Exception):
    """Base class for failures of a single invocation."""
    exit_status = ExitStatus.FAILURE
    show_checklist = False

class UsageError(AskError):
    """No prompt, or unusable configuration."""

class VmResolutionError(AskError):
    """The VM is unknown, stopped, or has no address."""

class VmManagerNotFoundError(VmResolutionError):
    """The VM manager binary is not installed."""

class RequestError(AskError):
    """Transport failure talking to the model server."""
    show_checklist = True

class EmptyResponseError(AskError):
    """The server returned no usable text."""
    show_checklist = True

class SpeechError(AskError):
    """The speech synthesizer is missing or failed."""
