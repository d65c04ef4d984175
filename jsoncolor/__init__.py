"""
jsoncolor pretty-prints JSON values with ANSI terminal colors.
This module serves as the main entry point for the library, exposing the
components needed by users.
"""

# Import the render functions most callers need
from jsoncolor.main import new_formatter, parse, render, render_text, render_text_to, render_to
# Import the colorizing formatter and the plain formatters it can wrap
from jsoncolor.colored import ColoredFormatter
from jsoncolor.format import CompactFormatter, Formatter, PrettyFormatter, RawJSON, serialize
# Import the style table
from jsoncolor.style import Color, Style, Styler
# Import the color policy
from jsoncolor.mode import ColorMode, Output, enable_virtual_terminal_processing, is_interactive, resolve
from jsoncolor.errors import JsonColorError, ParseError, PlatformError
