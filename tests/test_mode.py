# test_mode.py

import io
import sys
from types import SimpleNamespace

import pytest

from jsoncolor import mode
from jsoncolor.errors import PlatformError
from jsoncolor.mode import ColorMode, Output, enable_virtual_terminal_processing, is_interactive, resolve

from conftest import FakeTTY


class TestIsInteractive:
    """Tests for terminal detection."""

    def test_stdout_terminal(self, monkeypatch):
        monkeypatch.setattr(sys, "stdout", FakeTTY())
        assert is_interactive(Output.STDOUT) is True

    def test_stdout_redirected(self, monkeypatch):
        monkeypatch.setattr(sys, "stdout", FakeTTY(interactive=False))
        assert is_interactive(Output.STDOUT) is False

    def test_stderr_probed_separately(self, monkeypatch):
        monkeypatch.setattr(sys, "stderr", FakeTTY())
        monkeypatch.setattr(sys, "stdout", FakeTTY(interactive=False))
        assert is_interactive(Output.STDERR) is True
        assert is_interactive(Output.STDOUT) is False

    def test_missing_stream(self, monkeypatch):
        monkeypatch.setattr(sys, "stdout", None)
        assert is_interactive(Output.STDOUT) is False

    def test_closed_stream(self, monkeypatch):
        stream = io.StringIO()
        stream.close()
        monkeypatch.setattr(sys, "stdout", stream)
        assert is_interactive(Output.STDOUT) is False

    def test_checked_on_every_call(self, monkeypatch):
        stream = FakeTTY(interactive=False)
        monkeypatch.setattr(sys, "stdout", stream)
        assert is_interactive(Output.STDOUT) is False
        stream.interactive = True
        assert is_interactive(Output.STDOUT) is True


class TestColorMode:
    """Tests for resolving color modes."""

    def test_on_ignores_terminal(self, monkeypatch):
        monkeypatch.setattr(sys, "stdout", FakeTTY(interactive=False))
        assert ColorMode.ON.use_color() is True

    def test_off_ignores_terminal(self, monkeypatch):
        monkeypatch.setattr(sys, "stdout", FakeTTY())
        monkeypatch.setattr(sys, "stderr", FakeTTY())
        assert ColorMode.OFF.use_color() is False

    def test_auto_follows_stdout(self, monkeypatch):
        monkeypatch.setattr(sys, "stdout", FakeTTY())
        monkeypatch.setattr(sys, "stderr", FakeTTY(interactive=False))
        assert ColorMode.AUTO.use_color() is True
        assert ColorMode.AUTO_ERR.use_color() is False

    def test_auto_err_follows_stderr(self, monkeypatch):
        monkeypatch.setattr(sys, "stderr", FakeTTY())
        monkeypatch.setattr(sys, "stdout", FakeTTY(interactive=False))
        assert ColorMode.AUTO_ERR.use_color() is True
        assert ColorMode.AUTO.use_color() is False

    def test_resolve(self, monkeypatch):
        monkeypatch.setattr(sys, "stdout", FakeTTY())
        monkeypatch.setattr(sys, "stderr", FakeTTY(interactive=False))
        assert ColorMode.AUTO.resolve() is ColorMode.ON
        assert resolve(ColorMode.AUTO_ERR) is ColorMode.OFF
        assert resolve(ColorMode.ON) is ColorMode.ON
        assert resolve(ColorMode.OFF) is ColorMode.OFF

    def test_targets(self):
        assert ColorMode.AUTO.target is Output.STDOUT
        assert ColorMode.AUTO_ERR.target is Output.STDERR
        assert ColorMode.ON.target is None

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("always", ColorMode.ON),
            ("On", ColorMode.ON),
            ("force", ColorMode.ON),
            ("never", ColorMode.OFF),
            (" NO ", ColorMode.OFF),
            ("auto", ColorMode.AUTO),
            ("if-tty", ColorMode.AUTO),
            ("auto-err", ColorMode.AUTO_ERR),
        ],
    )
    def test_parse(self, text, expected):
        assert ColorMode.parse(text) is expected

    def test_parse_rejects_unknown(self):
        with pytest.raises(ValueError, match="Unsupported color mode"):
            ColorMode.parse("sometimes")


class TestVirtualTerminal:
    """Tests for the Windows console bootstrap."""

    def test_noop_off_windows(self, monkeypatch):
        def fail(fd):
            raise AssertionError("must not touch the console")

        monkeypatch.setattr(mode, "sys", SimpleNamespace(platform="linux", stdout=FakeTTY()))
        monkeypatch.setattr(mode, "enable_vt_processing", fail)
        assert enable_virtual_terminal_processing() is None

    def test_enabled_on_windows(self, monkeypatch):
        stdout = SimpleNamespace(fileno=lambda: 1)
        calls = []
        monkeypatch.setattr(mode, "sys", SimpleNamespace(platform="win32", stdout=stdout))
        monkeypatch.setattr(mode, "enable_vt_processing", lambda fd: calls.append(fd) or True)
        enable_virtual_terminal_processing()
        assert calls == [1]

    def test_refused_on_windows(self, monkeypatch):
        stdout = SimpleNamespace(fileno=lambda: 1)
        monkeypatch.setattr(mode, "sys", SimpleNamespace(platform="win32", stdout=stdout))
        monkeypatch.setattr(mode, "enable_vt_processing", lambda fd: False)
        with pytest.raises(PlatformError):
            enable_virtual_terminal_processing()

    def test_no_console_handle(self, monkeypatch):
        monkeypatch.setattr(mode, "sys", SimpleNamespace(platform="win32", stdout=io.StringIO()))
        with pytest.raises(PlatformError, match="no console handle"):
            enable_virtual_terminal_processing()

    def test_platform_error_is_an_os_error(self):
        assert issubclass(PlatformError, OSError)
