"""Layered configuration: built-in defaults < YAML file < environment < CLI flags."""
from __future__ import annotations
import dataclasses
import logging
import os
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import ValidationError

from askvm.common.errors import UsageError
from askvm.common.schema import InvocationConfig

LOGGER = logging.getLogger("askvm.config")

CONFIG_ENV = "ASK_CONFIG"

# env var -> (field, converter)
ENV_FIELDS = {
    "ASK_VM": ("vm_name", str),
    "ASK_MODEL": ("model_name", str),
    "ASK_VOICE": ("voice_name", str),
    "ASK_PORT": ("port", int),
    "ASK_TIMEOUT": ("timeout", float),
}

FILE_FIELDS = {f.name for f in dataclasses.fields(InvocationConfig)} - {"prompt"}

def load_cfg(path: str) -> dict[str, Any]:
    """
    Read a YAML mapping of configuration defaults.

    Args:
        path: YAML file path.
    """
    p = Path(path)
    if not p.is_file():
        raise UsageError(f"Config file not found: {path}")
    with open(p, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise UsageError(f"Config file {path} must contain a mapping")
    unknown = set(data) - FILE_FIELDS
    if unknown:
        raise UsageError(f"Unknown config keys in {path}: {', '.join(sorted(unknown))}")
    return data

def env_overrides(environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    env = os.environ if environ is None else environ
    out: dict[str, Any] = {}
    for name, (field, convert) in ENV_FIELDS.items():
        raw = env.get(name)
        if raw is None or raw == "":
            continue
        try:
            out[field] = convert(raw)
        except ValueError:
            raise UsageError(f"Invalid value for {name}: {raw!r}")
    return out

def build_config(
    prompt: str,
    flags: Mapping[str, Any] | None = None,
    cfg_path: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> InvocationConfig:
    """
    Merge all configuration layers into an InvocationConfig.

    Args:
        prompt: Prompt text from the command line.
        flags: CLI values; None entries mean "not given".
        cfg_path: Optional YAML file; falls back to $ASK_CONFIG.
        environ: Environment mapping, defaults to os.environ.
    """
    env = os.environ if environ is None else environ
    values: dict[str, Any] = {}

    path = cfg_path or env.get(CONFIG_ENV)
    if path:
        values.update(load_cfg(path))
        LOGGER.debug("Loaded config from %s", path)
    values.update(env_overrides(env))
    values.update({k: v for k, v in (flags or {}).items() if v is not None})

    try:
        return InvocationConfig(prompt=prompt, **values)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise UsageError(f"Invalid configuration: {problems}")
