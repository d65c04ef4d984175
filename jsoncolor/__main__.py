"""
Command line tool: pretty-print JSON files or stdin with colors.

    python -m jsoncolor data.json --color always | less -R
"""

import argparse
import os
import sys
from typing import List, Optional

# Import colored text functionality for terminal output
from termcolor import cprint

from jsoncolor.errors import ParseError, PlatformError
from jsoncolor.format import CompactFormatter, PrettyFormatter
from jsoncolor.main import render_text_to
from jsoncolor.mode import ColorMode, enable_virtual_terminal_processing

# Environment variable holding the default for --color
COLOR_ENV = "JSONCOLOR"


def _color_mode(text: str) -> ColorMode:
    try:
        return ColorMode.parse(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsoncolor",
        description="Pretty-print JSON with terminal colors.",
    )
    parser.add_argument("files", nargs="*", metavar="FILE", help="JSON files to print; '-' or none reads stdin")
    parser.add_argument(
        "--color",
        type=_color_mode,
        default=None,
        metavar="{auto,always,never}",
        help=f"when to colorize (default: ${COLOR_ENV} or auto)",
    )
    parser.add_argument("--compact", action="store_true", help="print without whitespace")
    parser.add_argument("--indent", type=int, default=2, metavar="N", help="spaces per indentation level")
    parser.add_argument("--sort-keys", action="store_true", help="order object entries by key")
    parser.add_argument("--debug", action="store_true", help="print the resolved settings to stderr")
    return parser


def debug(enabled: bool, caller: str, value: str) -> None:
    """Print debug information to stderr if enabled."""
    if enabled:
        cprint(caller, "green", end=" ", file=sys.stderr)
        cprint(value, "blue", file=sys.stderr)


def error(message: str) -> None:
    cprint(message, "red", file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    mode = args.color
    if mode is None:
        env_value = os.environ.get(COLOR_ENV)
        try:
            mode = ColorMode.parse(env_value) if env_value else ColorMode.AUTO
        except ValueError as e:
            error(f"jsoncolor: ${COLOR_ENV}: {e}")
            return 2
    resolved = mode.resolve()

    if resolved is ColorMode.ON:
        try:
            enable_virtual_terminal_processing()
        except PlatformError as e:
            debug(args.debug, "[main] virtual terminal:", str(e))
            # Only an explicit --color always keeps escapes the console cannot show
            if mode is not ColorMode.ON:
                resolved = ColorMode.OFF
    mode = resolved

    formatter = CompactFormatter() if args.compact else PrettyFormatter(args.indent)
    debug(args.debug, "[main] color mode:", mode.value)
    debug(args.debug, "[main] formatter:", type(formatter).__name__)

    # Write bytes so strings json accepts but UTF-8 cannot encode (lone surrogates) are replaced
    out = getattr(sys.stdout, "buffer", None)
    newline = b"\n"
    if out is None:
        out = sys.stdout
        newline = "\n"
    sys.stdout.flush()

    files = args.files or ["-"]
    for name in files:
        try:
            if name == "-":
                text = sys.stdin.buffer.read()
            else:
                with open(name, "rb") as fp:
                    text = fp.read()
        except OSError as e:
            error(f"jsoncolor: {name}: {e.strerror or e}")
            return 1

        try:
            render_text_to(text, out, mode, formatter=formatter, sort_keys=args.sort_keys)
        except ParseError as e:
            error(f"jsoncolor: {name}: {e}")
            return 1
        out.write(newline)

    out.flush()
    return 0


def _run() -> None:
    try:
        sys.exit(main())
    except BrokenPipeError:
        # Python flushes stdout on exit; point it at devnull so that flush cannot fail again
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        sys.exit(0)


if __name__ == "__main__":
    _run()
