"""`ask` command line entry point."""
from __future__ import annotations
import argparse
import sys
from typing import NoReturn

from askvm.common.errors import ExitStatus, UsageError
from askvm.common.config import build_config
from askvm.common.logging_setup import level_for, setup_logging
from askvm.dispatcher import USAGE, run

class AskArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports bad arguments with exit status 1."""

    def error(self, message: str) -> NoReturn:
        print(USAGE)
        print(f"{self.prog}: error: {message}", file=sys.stderr)
        sys.exit(ExitStatus.FAILURE)

def build_parser() -> argparse.ArgumentParser:
    ap = AskArgumentParser(
        prog="ask",
        description="Ask a model served from a VM, print and speak the answer",
        epilog="Put -- before a prompt that starts with \"-\".",
    )
    ap.add_argument("--vm", dest="vm_name", default=None, help="VM name (default: primary)")
    ap.add_argument("--model", dest="model_name", default=None, help="Model name")
    ap.add_argument("--voice", dest="voice_name", default=None, help="Speech voice (default: system voice)")
    ap.add_argument("--port", type=int, default=None, help="Model server port (default: 11434)")
    ap.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds (default: none)")
    ap.add_argument("--no-speak", dest="speak", action="store_const", const=False, default=None,
                    help="Print only, do not speak")
    ap.add_argument("--cfg", default=None, help="YAML config path")
    ap.add_argument("-v", "--verbose", action="count", default=0, help="More logging (-vv for debug)")
    ap.add_argument("prompt", nargs="*", help="Prompt text")
    return ap

def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_intermixed_args(argv)
    setup_logging(level_for(args.verbose))

    prompt = " ".join(t for t in args.prompt if t != "--").strip()
    if not prompt:
        print(USAGE)
        return ExitStatus.FAILURE

    flags = {
        "vm_name": args.vm_name,
        "model_name": args.model_name,
        "voice_name": args.voice_name,
        "port": args.port,
        "timeout": args.timeout,
        "speak": args.speak,
    }
    try:
        config = build_config(prompt, flags, args.cfg)
    except UsageError as e:
        print(f"Error: {e}", file=sys.stderr)
        return e.exit_status
    return run(config)

if __name__ == "__main__":
    sys.exit(main())
