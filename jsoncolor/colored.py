"""
The colorizing formatter.

``ColoredFormatter`` wraps another formatter and receives the same callbacks.
For every token it lets the wrapped formatter write into a scratch buffer,
paints what was written with the style the ``Styler`` assigns to that token
and writes the painted text to the real writer. Layout decisions (indentation,
commas, escaping) are left entirely to the wrapped formatter, so removing the
escape sequences from the output gives exactly what the wrapped formatter
would have written on its own.
"""

import copy
import io
from typing import Any, Callable, Optional

from jsoncolor.format import Formatter, Writer, serialize
from jsoncolor.mode import ColorMode
from jsoncolor.style import Style, Styler


class ColoredFormatter:
    """
    Formatter decorator that adds terminal styles to another formatter's output.

    The only state kept between callbacks is whether the current string is an
    object key, which selects the key style over the string value style.

    Args:
        formatter (Formatter): The formatter that decides the layout
        styler (Styler): The style table (default: ``Styler()``)

    Example:
        >>> f = ColoredFormatter(CompactFormatter(), Styler(key=Color.GREEN.normal()))
        >>> f.render({"name": "John"}, ColorMode.ON)
    """

    def __init__(self, formatter: Formatter, styler: Optional[Styler] = None):
        self.formatter = formatter
        self.styler = styler if styler is not None else Styler()
        self.in_object_key = False
        self._scratch = io.StringIO()

    def __repr__(self):
        return f"{type(self).__name__}({self.formatter!r}, {self.styler!r})"

    def _colored(
        self, writer: Writer, style: Style, handler: Callable[[Writer], Any]
    ) -> None:
        """Run handler against the scratch buffer and write its output painted."""
        self._scratch.seek(0)
        self._scratch.truncate()
        handler(self._scratch)
        text = self._scratch.getvalue()
        if text:
            writer.write(style.paint(text))

    def _string_style(self) -> Style:
        if self.in_object_key:
            return self.styler.key
        return self.styler.string_value

    def write_null(self, writer: Writer) -> None:
        self._colored(writer, self.styler.nil_value, self.formatter.write_null)

    def write_bool(self, writer: Writer, value: bool) -> None:
        self._colored(
            writer,
            self.styler.bool_value,
            lambda w: self.formatter.write_bool(w, value),
        )

    def write_int(self, writer: Writer, value: int) -> None:
        self._colored(
            writer,
            self.styler.integer_value,
            lambda w: self.formatter.write_int(w, value),
        )

    def write_float(self, writer: Writer, value: float) -> None:
        self._colored(
            writer,
            self.styler.float_value,
            lambda w: self.formatter.write_float(w, value),
        )

    def write_number_str(self, writer: Writer, value: str) -> None:
        self._colored(
            writer,
            self.styler.integer_value,
            lambda w: self.formatter.write_number_str(w, value),
        )

    def begin_string(self, writer: Writer) -> None:
        if self.styler.string_include_quotation:
            self._colored(writer, self._string_style(), self.formatter.begin_string)
        else:
            self.formatter.begin_string(writer)

    def end_string(self, writer: Writer) -> None:
        if self.styler.string_include_quotation:
            self._colored(writer, self._string_style(), self.formatter.end_string)
        else:
            self.formatter.end_string(writer)

    def write_string_fragment(self, writer: Writer, fragment: str) -> None:
        self._colored(
            writer,
            self._string_style(),
            lambda w: self.formatter.write_string_fragment(w, fragment),
        )

    def write_char_escape(self, writer: Writer, escape: str) -> None:
        self._colored(
            writer,
            self._string_style(),
            lambda w: self.formatter.write_char_escape(w, escape),
        )

    def begin_array(self, writer: Writer) -> None:
        self._colored(writer, self.styler.array_brackets, self.formatter.begin_array)

    def end_array(self, writer: Writer) -> None:
        self._colored(writer, self.styler.array_brackets, self.formatter.end_array)

    def begin_array_value(self, writer: Writer, first: bool) -> None:
        self.formatter.begin_array_value(writer, first)

    def end_array_value(self, writer: Writer) -> None:
        self.formatter.end_array_value(writer)

    def begin_object(self, writer: Writer) -> None:
        self._colored(writer, self.styler.object_brackets, self.formatter.begin_object)

    def end_object(self, writer: Writer) -> None:
        self._colored(writer, self.styler.object_brackets, self.formatter.end_object)

    def begin_object_key(self, writer: Writer, first: bool) -> None:
        self.in_object_key = True
        self.formatter.begin_object_key(writer, first)

    def end_object_key(self, writer: Writer) -> None:
        # Anything the wrapped formatter writes here is still part of the key
        self._colored(writer, self.styler.key, self.formatter.end_object_key)
        self.in_object_key = False

    def begin_object_value(self, writer: Writer) -> None:
        self.in_object_key = False
        self.formatter.begin_object_value(writer)

    def end_object_value(self, writer: Writer) -> None:
        self.in_object_key = False
        self.formatter.end_object_value(writer)

    def write_raw_fragment(self, writer: Writer, fragment: str) -> None:
        self.formatter.write_raw_fragment(writer, fragment)

    def clone(self) -> "ColoredFormatter":
        """
        Return an independent copy ready for a new render.

        The wrapped formatter is deep-copied so layout state such as the
        current indentation level is not shared; the styler is immutable and
        shared as is.
        """
        return type(self)(copy.deepcopy(self.formatter), self.styler)

    def write(
        self,
        value: Any,
        writer: Writer,
        mode: ColorMode = ColorMode.AUTO,
        *,
        sort_keys: bool = False,
    ) -> None:
        """
        Serialize a value to writer, colorized if mode says so.

        With color off the value goes through the wrapped formatter alone and
        the output contains no escape sequences. This formatter itself is left
        untouched, so it can be used for any number of renders.

        Args:
            value: The JSON value tree to write
            writer: The text stream to write to
            mode (ColorMode): Whether to colorize (default: auto-detect stdout)
            sort_keys (bool): Write object entries ordered by key

        Raises:
            OSError: If writing fails; output written so far is left in place
        """
        fresh = self.clone()
        if mode.use_color():
            serialize(value, writer, fresh, sort_keys=sort_keys)
        else:
            serialize(value, writer, fresh.formatter, sort_keys=sort_keys)

    def render(
        self,
        value: Any,
        mode: ColorMode = ColorMode.AUTO,
        *,
        sort_keys: bool = False,
    ) -> str:
        """Serialize a value and return the text."""
        out = io.StringIO()
        self.write(value, out, mode, sort_keys=sort_keys)
        return out.getvalue()

