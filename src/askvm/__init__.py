"""
ask-vm package.

Provides:
- Endpoint resolution for a model server running inside a Multipass VM
- A single-shot Ollama generate call with reasoning markup stripped
- Spoken output via the host speech synthesizer
"""
