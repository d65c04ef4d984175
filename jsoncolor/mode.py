"""
Deciding whether output should be colorized.

``ColorMode`` either forces color on or off, or defers to whether stdout or
stderr is an interactive terminal at the moment a render starts.
"""

import sys
from enum import Enum

# Import the Windows console helper; it reports failure off Windows
from colorama.winterm import enable_vt_processing

from jsoncolor.errors import PlatformError


class Output(Enum):
    """The standard streams color can be auto-detected for."""

    STDOUT = "stdout"
    STDERR = "stderr"


def is_interactive(output: Output) -> bool:
    """
    Check whether a standard stream is an interactive terminal.

    The stream is looked up on ``sys`` on every call, so redirecting or
    replacing it is picked up immediately. A missing, closed or detached
    stream is not interactive.

    Args:
        output (Output): The stream to probe

    Returns:
        bool: True if the stream is a terminal
    """
    stream = sys.stdout if output is Output.STDOUT else sys.stderr
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        # Raised by closed or detached streams
        return False


class ColorMode(Enum):
    """
    When to colorize.

    ``AUTO`` colorizes when stdout is a terminal, ``AUTO_ERR`` when stderr is.
    """

    ON = "on"
    OFF = "off"
    AUTO = "auto"
    AUTO_ERR = "auto-err"

    @property
    def target(self):
        """The stream an auto mode probes, or None for ON and OFF."""
        if self is ColorMode.AUTO:
            return Output.STDOUT
        if self is ColorMode.AUTO_ERR:
            return Output.STDERR
        return None

    @staticmethod
    def should_colorize(output: Output) -> bool:
        return is_interactive(output)

    def use_color(self) -> bool:
        """Resolve this mode to a yes/no answer, probing the terminal if needed."""
        if self is ColorMode.ON:
            return True
        if self is ColorMode.OFF:
            return False
        return self.should_colorize(self.target)

    def resolve(self) -> "ColorMode":
        """Collapse an auto mode to ON or OFF based on the terminal right now."""
        return ColorMode.ON if self.use_color() else ColorMode.OFF

    @classmethod
    def parse(cls, text: str) -> "ColorMode":
        """
        Parse a mode from a command line flag or environment variable value.

        Args:
            text (str): One of always/on/true/yes/force, never/off/false/no/none
                or auto/tty/if-tty, in any case

        Returns:
            ColorMode: The parsed mode; auto values map to ``AUTO``

        Raises:
            ValueError: If text is not a recognized mode
        """
        normalized = text.strip().lower()
        if normalized in _PARSE_TABLE:
            return _PARSE_TABLE[normalized]
        if normalized in ("auto-err", "auto_err"):
            return cls.AUTO_ERR
        raise ValueError(f"Unsupported color mode: {text!r}")


_PARSE_TABLE = {
    "always": ColorMode.ON,
    "on": ColorMode.ON,
    "true": ColorMode.ON,
    "yes": ColorMode.ON,
    "force": ColorMode.ON,
    "never": ColorMode.OFF,
    "off": ColorMode.OFF,
    "false": ColorMode.OFF,
    "no": ColorMode.OFF,
    "none": ColorMode.OFF,
    "auto": ColorMode.AUTO,
    "tty": ColorMode.AUTO,
    "if-tty": ColorMode.AUTO,
}


def resolve(mode: ColorMode) -> ColorMode:
    """Collapse an auto mode to ON or OFF. See ``ColorMode.resolve``."""
    return mode.resolve()


def enable_virtual_terminal_processing() -> None:
    """
    Make the Windows console interpret ANSI escape sequences.

    Call once before writing colored output. Legacy Windows consoles print
    escape sequences literally unless virtual terminal processing is turned
    on for them. On every other platform this does nothing.

    Raises:
        PlatformError: If stdout is not a console that accepts the mode
    """
    if sys.platform != "win32":
        return
    try:
        fd = sys.stdout.fileno()
    except (AttributeError, OSError, ValueError) as e:
        raise PlatformError(f"stdout has no console handle: {e}") from e
    if not enable_vt_processing(fd):
        raise PlatformError("Failed to enable virtual terminal processing")
