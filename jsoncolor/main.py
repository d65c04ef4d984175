"""
jsoncolor: pretty-print JSON values with terminal colors.

This module holds the entry points most callers need. They pick between the
colorizing formatter and a plain one based on a ColorMode, then either return
the rendered text or stream it to a writer.
"""

import copy
import io
import json
from typing import Any, Optional, Union

from jsoncolor.colored import ColoredFormatter
from jsoncolor.errors import ParseError
from jsoncolor.format import Formatter, PrettyFormatter, Writer, serialize
from jsoncolor.mode import ColorMode
from jsoncolor.style import Styler

Text = Union[str, bytes, bytearray]


class _BinaryWriter:
    """Adapts a binary stream to the text writer formatters expect."""

    def __init__(self, stream):
        self.stream = stream

    def write(self, s: str) -> None:
        self.stream.write(s.encode("utf-8", errors="replace"))


def _text_writer(writer: Any) -> Writer:
    if isinstance(writer, (io.RawIOBase, io.BufferedIOBase)):
        return _BinaryWriter(writer)
    return writer


def new_formatter(
    underlying: Optional[Formatter] = None, styler: Optional[Styler] = None
) -> ColoredFormatter:
    """
    Build a colorizing formatter that can be passed to ``serialize``.

    Args:
        underlying: The formatter deciding layout (default: PrettyFormatter())
        styler: The style table (default: Styler())

    Returns:
        ColoredFormatter: The decorator wrapping ``underlying``
    """
    if underlying is None:
        underlying = PrettyFormatter()
    return ColoredFormatter(underlying, styler)


def render_to(
    value: Any,
    writer: Any,
    mode: ColorMode = ColorMode.AUTO,
    styler: Optional[Styler] = None,
    formatter: Optional[Formatter] = None,
    *,
    sort_keys: bool = False,
) -> None:
    """
    Write a JSON value to a stream, colorized when mode says so.

    Args:
        value: The value tree, as returned by ``json.loads``
        writer: A text stream. Instances of io.RawIOBase or io.BufferedIOBase
            are written UTF-8 bytes instead; any other object is handed str,
            so a bytes-only writer that is not an io stream must be wrapped
            (for example in io.TextIOWrapper) first
        mode (ColorMode): When to colorize (default: if stdout is a terminal)
        styler (Styler): The style table (default: Styler())
        formatter: The plain formatter deciding layout; it is copied, never
            used directly (default: PrettyFormatter())
        sort_keys (bool): Write object entries ordered by key

    Raises:
        OSError: If writing fails part way; what was written stays written
        TypeError: If the tree holds something that is not JSON
    """
    if formatter is None:
        formatter = PrettyFormatter()
    else:
        formatter = copy.deepcopy(formatter)
    writer = _text_writer(writer)

    if mode.use_color():
        serialize(value, writer, ColoredFormatter(formatter, styler), sort_keys=sort_keys)
    else:
        serialize(value, writer, formatter, sort_keys=sort_keys)


def render(
    value: Any,
    mode: ColorMode = ColorMode.AUTO,
    styler: Optional[Styler] = None,
    formatter: Optional[Formatter] = None,
    *,
    sort_keys: bool = False,
) -> str:
    """
    Render a JSON value to a string.

    Example:
        >>> print(render({"name": "John", "age": 43}, ColorMode.OFF))
        {
          "name": "John",
          "age": 43
        }
    """
    out = io.StringIO()
    render_to(value, out, mode, styler, formatter, sort_keys=sort_keys)
    return out.getvalue()


def parse(text: Text) -> Any:
    """
    Parse JSON text.

    Bytes are decoded as UTF-8, replacing invalid sequences.

    Raises:
        ParseError: If the text is not valid JSON
    """
    if isinstance(text, (bytes, bytearray)):
        text = bytes(text).decode("utf-8", errors="replace")
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(e) from e


def render_text(
    text: Text,
    mode: ColorMode = ColorMode.AUTO,
    styler: Optional[Styler] = None,
    formatter: Optional[Formatter] = None,
    *,
    sort_keys: bool = False,
) -> str:
    """
    Parse JSON text and render it.

    Raises:
        ParseError: If the text is not valid JSON
    """
    return render(parse(text), mode, styler, formatter, sort_keys=sort_keys)


def render_text_to(
    text: Text,
    writer: Any,
    mode: ColorMode = ColorMode.AUTO,
    styler: Optional[Styler] = None,
    formatter: Optional[Formatter] = None,
    *,
    sort_keys: bool = False,
) -> None:
    """
    Parse JSON text and write it to a stream.

    Parsing finishes before anything is written, so invalid input leaves
    the stream untouched.

    Raises:
        ParseError: If the text is not valid JSON
    """
    value = parse(text)
    render_to(value, writer, mode, styler, formatter, sort_keys=sort_keys)
