"""Speak text through the host speech synthesizer (macOS `say`)."""
from __future__ import annotations
import logging
import subprocess

from askvm.common.errors import SpeechError

LOGGER = logging.getLogger("askvm.host.speech")

def speech_command(text: str, voice: str | None = None, command: str = "say") -> list[str]:
    """Synthesizer argv, with the text placed after `--`."""
    cmd = [command]
    if voice:
        cmd += ["-v", voice]
    cmd += ["--", text]
    return cmd

def speak(text: str, voice: str | None = None, command: str = "say") -> None:
    """
    Read text aloud, blocking until speech finishes.

    Args:
        text: Text to speak.
        voice: Named voice; None uses the synthesizer default.
        command: Synthesizer executable.
    """
    cmd = speech_command(text, voice, command)
    LOGGER.debug("Speaking with voice=%s", voice or "<default>")
    try:
        subprocess.run(cmd, check=True)
    except FileNotFoundError as e:
        raise SpeechError(f"Speech synthesizer '{command}' is not installed") from e
    except subprocess.CalledProcessError as e:
        raise SpeechError(f"Speech synthesizer exited with status {e.returncode}") from e
