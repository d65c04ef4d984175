"""
Terminal styles and the style table used when colorizing JSON.

A ``Style`` bundles a foreground color, a background color and text attributes
and knows how to paint a piece of text with them through termcolor. A
``Styler`` assigns one ``Style`` to every kind of JSON token.
"""

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple, Union

# Import colored text functionality for terminal output
from termcolor import colored


class Color(str, Enum):
    """Terminal colors understood by termcolor."""

    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"
    LIGHT_GREY = "light_grey"
    DARK_GREY = "dark_grey"
    LIGHT_RED = "light_red"
    LIGHT_GREEN = "light_green"
    LIGHT_YELLOW = "light_yellow"
    LIGHT_BLUE = "light_blue"
    LIGHT_MAGENTA = "light_magenta"
    LIGHT_CYAN = "light_cyan"

    # Aliases for the names other ANSI libraries use
    PURPLE = "magenta"

    def normal(self) -> "Style":
        """Style with this foreground color and no attributes."""
        return Style(color=self)

    def bold(self) -> "Style":
        return Style(color=self, attrs=("bold",))

    def italic(self) -> "Style":
        return Style(color=self, attrs=("italic",))

    def underline(self) -> "Style":
        return Style(color=self, attrs=("underline",))


ColorName = Union[Color, str]


def _color_name(color: Optional[ColorName]) -> Optional[str]:
    # Enum members hash by name, termcolor looks colors up by value
    if isinstance(color, Color):
        return color.value
    return color


@dataclass(frozen=True)
class Style:
    """
    An immutable terminal display style.

    Attributes:
        color (str): Foreground color name, or None for the terminal default
        on_color (str): Background color name as termcolor spells it
            (``"on_blue"``), or None
        attrs (Tuple[str, ...]): Text attributes such as ``"bold"`` or ``"italic"``

    Example:
        >>> Style.new().fg(Color.BLUE).bold().paint("key")
        '\\x1b[1m\\x1b[34mkey\\x1b[0m'
    """

    color: Optional[ColorName] = None
    on_color: Optional[ColorName] = None
    attrs: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "color", _color_name(self.color))
        on_color = _color_name(self.on_color)
        if isinstance(on_color, str) and not on_color.startswith("on_"):
            on_color = "on_" + on_color
        object.__setattr__(self, "on_color", on_color)
        object.__setattr__(self, "attrs", tuple(self.attrs))

    @classmethod
    def new(cls) -> "Style":
        """The empty style: painting with it leaves text untouched."""
        return cls()

    @property
    def is_plain(self) -> bool:
        return self.color is None and self.on_color is None and not self.attrs

    def fg(self, color: ColorName) -> "Style":
        return dataclasses.replace(self, color=color)

    def on(self, color: ColorName) -> "Style":
        return dataclasses.replace(self, on_color=color)

    def with_attrs(self, attrs: Iterable[str]) -> "Style":
        merged = self.attrs + tuple(a for a in attrs if a not in self.attrs)
        return dataclasses.replace(self, attrs=merged)

    def bold(self) -> "Style":
        return self.with_attrs(("bold",))

    def dimmed(self) -> "Style":
        return self.with_attrs(("dark",))

    def italic(self) -> "Style":
        return self.with_attrs(("italic",))

    def underline(self) -> "Style":
        return self.with_attrs(("underline",))

    def paint(self, text: str) -> str:
        """
        Wrap text in the escape sequences for this style.

        Painting is pure and ignores NO_COLOR, FORCE_COLOR and whether stdout
        is a terminal: whether to paint at all is decided by the caller.
        A plain style returns the text unchanged, without a trailing reset.

        Args:
            text (str): The text to paint

        Returns:
            str: The styled text
        """
        if self.is_plain:
            return text
        return colored(
            text,
            self.color,
            self.on_color,
            self.attrs or None,
            force_color=True,
        )


@dataclass(frozen=True)
class Styler:
    """
    The style table: one Style per JSON token class.

    The defaults give a jq-like palette: bold brackets, bold blue keys,
    green strings and unstyled numbers, booleans and null.

    Attributes:
        object_brackets (Style): Style for ``{`` and ``}``
        array_brackets (Style): Style for ``[`` and ``]``
        key (Style): Style for object keys
        string_value (Style): Style for string values
        integer_value (Style): Style for integers and raw number text
        float_value (Style): Style for floating point numbers
        bool_value (Style): Style for ``true`` and ``false``
        nil_value (Style): Style for ``null``
        string_include_quotation (bool): Whether the quotes around keys and
            strings get the key or string style; when False they are written
            unstyled and only the characters between them are painted
    """

    object_brackets: Style = Style(attrs=("bold",))
    array_brackets: Style = Style(attrs=("bold",))
    key: Style = Style(color=Color.BLUE, attrs=("bold",))
    string_value: Style = Style(color=Color.GREEN)
    integer_value: Style = Style()
    float_value: Style = Style()
    bool_value: Style = Style()
    nil_value: Style = Style()
    string_include_quotation: bool = True

    def replace(self, **changes) -> "Styler":
        """Return a copy with the given fields replaced."""
        return dataclasses.replace(self, **changes)
