"""Prompt dispatcher: one prompt in, one printed and spoken answer out.

Pipeline:
- resolve the VM address
- POST /api/generate  { "model": ..., "prompt": ..., "stream": false }
- strip <think> spans from the "response" field
- print, then speak
"""
from __future__ import annotations
import json
import logging
import sys
import time
from typing import Any

import httpx
from pydantic import ValidationError

from askvm.common.errors import (
    TROUBLESHOOTING,
    AskError,
    EmptyResponseError,
    ExitStatus,
    RequestError,
    UsageError,
)
from askvm.common.sanitize import clean_answer
from askvm.common.schema import GenerateRequest, GenerateResponse, InvocationConfig
from askvm.host.speech import speak
from askvm.host.vm import endpoint_url, resolve_address

LOGGER = logging.getLogger("askvm.dispatcher")

USAGE = 'Usage: ask [--vm <name>] [--model <name>] [--voice <name>] [--] "<prompt text>"'

GENERATE_PATH = "/api/generate"

def post_generate(base_url: str, req: GenerateRequest, timeout: float | None = None) -> str:
    """
    Send one generate request and return the raw response body.

    Raises:
        RequestError: The server could not be reached.
    """
    url = f"{base_url}{GENERATE_PATH}"
    start = time.time()
    try:
        with httpx.Client(timeout=timeout) as client:
            r = client.post(url, json=req.model_dump())
    except httpx.TransportError as e:
        LOGGER.error("Request to %s failed: %s", url, e)
        raise RequestError(f"Could not reach model server at {base_url}: {e}") from e
    latency = int((time.time() - start) * 1000)
    LOGGER.info("POST %s -> %s in %sms", url, r.status_code, latency)
    return r.text

def parse_response(body: str) -> GenerateResponse:
    """Parse a generate reply; anything unparseable yields an empty response."""
    try:
        data: Any = json.loads(body)
    except ValueError:
        LOGGER.warning("Response body is not JSON")
        return GenerateResponse()
    if not isinstance(data, dict):
        return GenerateResponse()
    try:
        return GenerateResponse.model_validate(data)
    except ValidationError as e:
        LOGGER.warning("Malformed response: %s", e)
        return GenerateResponse()

def ask(config: InvocationConfig) -> str:
    """
    Resolve, request and sanitize. Returns the cleaned answer.

    Raises:
        AskError: Any failure along the way.
    """
    if not config.prompt.strip():
        raise UsageError(USAGE)

    address = resolve_address(config.vm_name, config.vm_command)
    req = GenerateRequest(model=config.model_name, prompt=config.prompt)
    body = post_generate(endpoint_url(address, config.port), req, config.timeout)

    resp = parse_response(body)
    answer = clean_answer(resp.response)
    if answer is None:
        msg = "Model returned an empty response"
        if resp.error:
            LOGGER.warning("Server error: %s", resp.error)
            msg = f"{msg} (server said: {resp.error})"
        raise EmptyResponseError(msg)
    return answer

def run(config: InvocationConfig) -> ExitStatus:
    """
    Run one invocation end to end.

    Prints the answer, or the usage text and troubleshooting checklist, to
    stdout. One-line error messages go to stderr.

    Returns:
        ExitStatus.OK on success, ExitStatus.FAILURE otherwise.
    """
    try:
        answer = ask(config)
        print(answer)
        sys.stdout.flush()
        if config.speak:
            speak(answer, config.voice_name, config.speech_command)
    except AskError as e:
        if isinstance(e, UsageError):
            print(e)
        else:
            print(f"Error: {e}", file=sys.stderr)
        if e.show_checklist:
            print(TROUBLESHOOTING)
        return e.exit_status
    return ExitStatus.OK
