"""
Plain JSON formatters and the serializer that drives them.

Serialization is split in two: ``serialize`` walks a value tree depth-first
and reports every token to a formatter through a fixed set of callbacks,
and the formatter decides which text to write for each token. The two
formatters here differ only in layout; ``jsoncolor.colored.ColoredFormatter``
implements the same callbacks to add terminal styles on top of either of them.
"""

import math
import re
from collections.abc import Mapping
from decimal import Decimal
from operator import itemgetter
from typing import Any, List, Protocol, Union


class Writer(Protocol):
    """Anything text can be written to, such as ``sys.stdout`` or ``io.StringIO``."""

    def write(self, s: str) -> Any:
        ...


class Formatter(Protocol):
    """
    The callbacks a formatter receives while a value is serialized.

    Each callback writes the text for one token, or for the separators
    around it, to ``writer``. Errors raised by the writer must propagate.
    """

    def write_null(self, writer: Writer) -> None:
        ...

    def write_bool(self, writer: Writer, value: bool) -> None:
        ...

    def write_int(self, writer: Writer, value: int) -> None:
        ...

    def write_float(self, writer: Writer, value: float) -> None:
        ...

    def write_number_str(self, writer: Writer, value: str) -> None:
        ...

    def begin_string(self, writer: Writer) -> None:
        ...

    def end_string(self, writer: Writer) -> None:
        ...

    def write_string_fragment(self, writer: Writer, fragment: str) -> None:
        ...

    def write_char_escape(self, writer: Writer, escape: str) -> None:
        ...

    def begin_array(self, writer: Writer) -> None:
        ...

    def end_array(self, writer: Writer) -> None:
        ...

    def begin_array_value(self, writer: Writer, first: bool) -> None:
        ...

    def end_array_value(self, writer: Writer) -> None:
        ...

    def begin_object(self, writer: Writer) -> None:
        ...

    def end_object(self, writer: Writer) -> None:
        ...

    def begin_object_key(self, writer: Writer, first: bool) -> None:
        ...

    def end_object_key(self, writer: Writer) -> None:
        ...

    def begin_object_value(self, writer: Writer) -> None:
        ...

    def end_object_value(self, writer: Writer) -> None:
        ...

    def write_raw_fragment(self, writer: Writer, fragment: str) -> None:
        ...


class RawJSON(str):
    """
    Already serialized JSON text, written out verbatim.

    Serializing ``{"cached": RawJSON('{"a":1}')}`` with a CompactFormatter
    writes ``{"cached":{"a":1}}``. The text is not validated.
    """


class CompactFormatter:
    """Writes JSON with no whitespace at all."""

    def write_null(self, writer: Writer) -> None:
        writer.write("null")

    def write_bool(self, writer: Writer, value: bool) -> None:
        writer.write("true" if value else "false")

    def write_int(self, writer: Writer, value: int) -> None:
        # int.__repr__ so IntEnum members are written as numbers
        writer.write(int.__repr__(value))

    def write_float(self, writer: Writer, value: float) -> None:
        writer.write(float.__repr__(value))

    def write_number_str(self, writer: Writer, value: str) -> None:
        writer.write(value)

    def begin_string(self, writer: Writer) -> None:
        writer.write('"')

    def end_string(self, writer: Writer) -> None:
        writer.write('"')

    def write_string_fragment(self, writer: Writer, fragment: str) -> None:
        writer.write(fragment)

    def write_char_escape(self, writer: Writer, escape: str) -> None:
        writer.write(escape)

    def begin_array(self, writer: Writer) -> None:
        writer.write("[")

    def end_array(self, writer: Writer) -> None:
        writer.write("]")

    def begin_array_value(self, writer: Writer, first: bool) -> None:
        if not first:
            writer.write(",")

    def end_array_value(self, writer: Writer) -> None:
        pass

    def begin_object(self, writer: Writer) -> None:
        writer.write("{")

    def end_object(self, writer: Writer) -> None:
        writer.write("}")

    def begin_object_key(self, writer: Writer, first: bool) -> None:
        if not first:
            writer.write(",")

    def end_object_key(self, writer: Writer) -> None:
        pass

    def begin_object_value(self, writer: Writer) -> None:
        writer.write(":")

    def end_object_value(self, writer: Writer) -> None:
        pass

    def write_raw_fragment(self, writer: Writer, fragment: str) -> None:
        writer.write(fragment)


class PrettyFormatter(CompactFormatter):
    """
    Writes JSON with one item per line.

    Nested containers are indented by ``indent`` per level, keys are followed
    by ``": "`` and empty containers stay on one line (``[]``, ``{}``).
    No newline is written after the closing bracket of the outermost value.

    Args:
        indent (Union[str, int]): The indentation for one level, or a number
            of spaces (default: two spaces)
    """

    def __init__(self, indent: Union[str, int] = "  "):
        if isinstance(indent, int):
            indent = " " * indent
        self.indent = indent
        self.current_indent = 0
        self.has_value = False

    def _newline(self, writer: Writer) -> None:
        writer.write("\n")
        writer.write(self.indent * self.current_indent)

    def _begin(self, writer: Writer, bracket: str) -> None:
        self.current_indent += 1
        self.has_value = False
        writer.write(bracket)

    def _end(self, writer: Writer, bracket: str) -> None:
        self.current_indent -= 1
        if self.has_value:
            self._newline(writer)
        writer.write(bracket)

    def begin_array(self, writer: Writer) -> None:
        self._begin(writer, "[")

    def end_array(self, writer: Writer) -> None:
        self._end(writer, "]")

    def begin_array_value(self, writer: Writer, first: bool) -> None:
        if not first:
            writer.write(",")
        self._newline(writer)

    def end_array_value(self, writer: Writer) -> None:
        self.has_value = True

    def begin_object(self, writer: Writer) -> None:
        self._begin(writer, "{")

    def end_object(self, writer: Writer) -> None:
        self._end(writer, "}")

    def begin_object_key(self, writer: Writer, first: bool) -> None:
        if not first:
            writer.write(",")
        self._newline(writer)

    def begin_object_value(self, writer: Writer) -> None:
        writer.write(": ")

    def end_object_value(self, writer: Writer) -> None:
        self.has_value = True


# Characters that must be escaped inside a JSON string
ESCAPE = re.compile(r'[\x00-\x1f"\\]')
ESCAPE_DCT = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}
for _i in range(0x20):
    ESCAPE_DCT.setdefault(chr(_i), "\\u{0:04x}".format(_i))
del _i


def _key_text(key: Any) -> str:
    """Convert an object key to a string the same way json.dumps does."""
    if isinstance(key, str):
        return key
    if key is True:
        return "true"
    if key is False:
        return "false"
    if key is None:
        return "null"
    if isinstance(key, int):
        return int.__repr__(key)
    if isinstance(key, float):
        if math.isnan(key):
            return "NaN"
        if math.isinf(key):
            return "Infinity" if key > 0 else "-Infinity"
        return float.__repr__(key)
    raise TypeError(
        f"keys must be str, int, float, bool or None, not {type(key).__name__}"
    )


def serialize_str(value: str, writer: Writer, formatter: Formatter) -> None:
    """
    Write a JSON string through the formatter's string callbacks.

    Runs of characters that need no escaping are passed to
    ``write_string_fragment`` in one piece; each escape goes to
    ``write_char_escape``.
    """
    formatter.begin_string(writer)
    start = 0
    for match in ESCAPE.finditer(value):
        if match.start() > start:
            formatter.write_string_fragment(writer, value[start : match.start()])
        formatter.write_char_escape(writer, ESCAPE_DCT[match.group()])
        start = match.end()
    if start < len(value):
        formatter.write_string_fragment(writer, value[start:])
    formatter.end_string(writer)


def serialize(
    value: Any,
    writer: Writer,
    formatter: Formatter,
    *,
    sort_keys: bool = False,
) -> None:
    """
    Serialize a JSON value tree through a formatter.

    Supported values are None, bool, int, float, str, list, tuple and any
    Mapping, as produced by ``json.loads``, plus ``Decimal`` (written as a raw
    number) and ``RawJSON`` (written verbatim). NaN and infinite numbers are
    written as ``null``. Keys that are not strings are converted the way
    ``json.dumps`` converts them.

    Args:
        value: The value to serialize
        writer: Where the formatter writes its output
        formatter: The formatter that turns tokens into text
        sort_keys (bool): If True, write object entries ordered by key instead
            of in insertion order

    Raises:
        TypeError: If the tree contains an unsupported value or key type
    """

    def handle(obj: Any) -> None:
        if obj is None:
            formatter.write_null(writer)
        elif obj is True or obj is False:
            formatter.write_bool(writer, obj)
        elif isinstance(obj, RawJSON):
            formatter.write_raw_fragment(writer, str(obj))
        elif isinstance(obj, str):
            serialize_str(obj, writer, formatter)
        elif isinstance(obj, int):
            formatter.write_int(writer, obj)
        elif isinstance(obj, float):
            if math.isfinite(obj):
                formatter.write_float(writer, obj)
            else:
                formatter.write_null(writer)
        elif isinstance(obj, Decimal):
            if obj.is_finite():
                formatter.write_number_str(writer, str(obj))
            else:
                formatter.write_null(writer)
        elif isinstance(obj, (list, tuple)):
            formatter.begin_array(writer)
            for index, item in enumerate(obj):
                formatter.begin_array_value(writer, index == 0)
                handle(item)
                formatter.end_array_value(writer)
            formatter.end_array(writer)
        elif isinstance(obj, Mapping):
            items: List = [(_key_text(key), item) for key, item in obj.items()]
            if sort_keys:
                items.sort(key=itemgetter(0))
            formatter.begin_object(writer)
            for index, (key, item) in enumerate(items):
                formatter.begin_object_key(writer, index == 0)
                serialize_str(key, writer, formatter)
                formatter.end_object_key(writer)
                formatter.begin_object_value(writer)
                handle(item)
                formatter.end_object_value(writer)
            formatter.end_object(writer)
        else:
            raise TypeError(
                f"Object of type {type(obj).__name__} is not JSON serializable"
            )

    handle(value)
