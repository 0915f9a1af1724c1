"""Pydantic models and dataclasses for request/response types."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.dataclasses import dataclass

DEFAULT_VM = "primary"
DEFAULT_MODEL = "deepseek-r1:8b"
DEFAULT_PORT = 11434

@dataclass
class InvocationConfig:
    """Everything one `ask` invocation needs. Validated on construction."""
    prompt: str
    vm_name: str = Field(default=DEFAULT_VM, min_length=1)
    model_name: str = Field(default=DEFAULT_MODEL, min_length=1)
    voice_name: str | None = None
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    timeout: float | None = Field(default=None, gt=0)
    speak: bool = True
    vm_command: str = "multipass"
    speech_command: str = "say"

class GenerateRequest(BaseModel):
    model: str
    prompt: str
    stream: bool = False

class GenerateResponse(BaseModel):
    """Subset of the Ollama /api/generate reply that we consume."""
    model_config = ConfigDict(extra="ignore")

    response: str | None = None
    error: str | None = None
