import io
import re

import pytest

ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")

RESET = "\x1b[0m"
BOLD = "\x1b[1m"
GREEN = "\x1b[32m"
BLUE = "\x1b[34m"


def strip_ansi(text):
    return ANSI_ESCAPE.sub("", text)


class FakeTTY(io.StringIO):
    """A text stream that claims to be a terminal."""

    def __init__(self, interactive=True):
        super().__init__()
        self.interactive = interactive

    def isatty(self):
        return self.interactive


@pytest.fixture
def sample_document():
    return '{"array":["ele1","ele2"],"float":3.1415926,"integer":4398798674962568,"string":"string"}'
