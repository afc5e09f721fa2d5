"""Tests for the clipboard adapter."""

import subprocess
from unittest.mock import patch

import pytest

from sendtoai.clipboard import copy_to_clipboard, detect_clipboard_command
from sendtoai.errors import ClipboardCopyError, ClipboardUnavailableError


def _which_only(*available):
    return lambda cmd: f"/usr/bin/{cmd}" if cmd in available else None


class TestDetection:
    """Test clipboard command detection."""

    def test_prefers_pbcopy(self):
        with patch("sendtoai.clipboard.shutil.which", side_effect=_which_only("pbcopy", "xclip")):
            assert detect_clipboard_command() == "pbcopy"

    def test_wayland_before_x11(self):
        with patch("sendtoai.clipboard.shutil.which", side_effect=_which_only("xsel", "wl-copy", "xclip")):
            assert detect_clipboard_command() == "wl-copy"

    def test_xsel_last_resort(self):
        with patch("sendtoai.clipboard.shutil.which", side_effect=_which_only("xsel")):
            assert detect_clipboard_command() == "xsel"

    def test_none_available(self):
        with patch("sendtoai.clipboard.shutil.which", return_value=None):
            assert detect_clipboard_command() is None

    def test_hit_is_cached(self):
        with patch("sendtoai.clipboard.shutil.which", side_effect=_which_only("xclip")) as mock_which:
            assert detect_clipboard_command() == "xclip"
            calls = mock_which.call_count
            assert detect_clipboard_command() == "xclip"
            assert mock_which.call_count == calls

    def test_miss_is_not_cached(self):
        with patch("sendtoai.clipboard.shutil.which", return_value=None):
            assert detect_clipboard_command() is None
        with patch("sendtoai.clipboard.shutil.which", side_effect=_which_only("pbcopy")):
            assert detect_clipboard_command() == "pbcopy"


class TestCopy:
    """Test piping text to the clipboard command."""

    @pytest.mark.parametrize(
        "cmd,expected_args",
        [
            ("pbcopy", ["pbcopy"]),
            ("clip.exe", ["clip.exe"]),
            ("wl-copy", ["wl-copy"]),
            ("xclip", ["xclip", "-selection", "clipboard"]),
            ("xsel", ["xsel", "-b"]),
        ],
    )
    def test_command_flags(self, cmd, expected_args):
        ok = subprocess.CompletedProcess([], 0, stdout=None, stderr="")
        with patch("sendtoai.clipboard.shutil.which", side_effect=_which_only(cmd)):
            with patch("sendtoai.clipboard.subprocess.run", return_value=ok) as mock_run:
                copy_to_clipboard("File: a.py:1")

        args, kwargs = mock_run.call_args
        assert args[0] == expected_args
        assert kwargs["input"] == "File: a.py:1"

    def test_text_passed_verbatim(self):
        text = "File: a.sh:1-2\necho $(rm -rf /)\n'quoted' \"double\" `tick`"
        ok = subprocess.CompletedProcess([], 0, stdout=None, stderr="")
        with patch("sendtoai.clipboard.shutil.which", side_effect=_which_only("pbcopy")):
            with patch("sendtoai.clipboard.subprocess.run", return_value=ok) as mock_run:
                copy_to_clipboard(text)
        assert mock_run.call_args.kwargs["input"] == text

    def test_unavailable(self):
        with patch("sendtoai.clipboard.shutil.which", return_value=None):
            with pytest.raises(ClipboardUnavailableError) as exc_info:
                copy_to_clipboard("x")
        assert exc_info.value.kind == "clipboard_unavailable"
        assert "xclip" in exc_info.value.hint

    @pytest.mark.parametrize("cmd", ["pbcopy", "wl-copy", "xclip", "xsel"])
    def test_non_zero_exit_reports_stderr(self, cmd):
        def run(args, **kwargs):
            kwargs["stderr"].write(b"Error: Can't open display: (null)\n")
            return subprocess.CompletedProcess(args, 1)

        with patch("sendtoai.clipboard.shutil.which", side_effect=_which_only(cmd)):
            with patch("sendtoai.clipboard.subprocess.run", side_effect=run):
                with pytest.raises(ClipboardCopyError, match="Can't open display") as exc_info:
                    copy_to_clipboard("x")
        assert exc_info.value.kind == "clipboard_copy_failed"

    def test_stderr_is_captured_without_a_pipe(self):
        ok = subprocess.CompletedProcess([], 0)
        with patch("sendtoai.clipboard.shutil.which", side_effect=_which_only("xclip")):
            with patch("sendtoai.clipboard.subprocess.run", return_value=ok) as mock_run:
                copy_to_clipboard("x")
        stderr = mock_run.call_args.kwargs["stderr"]
        assert stderr is not subprocess.PIPE
        assert stderr is not subprocess.DEVNULL

    def test_non_zero_exit_without_stderr(self):
        failed = subprocess.CompletedProcess([], 2, stdout=None, stderr=None)
        with patch("sendtoai.clipboard.shutil.which", side_effect=_which_only("xclip")):
            with patch("sendtoai.clipboard.subprocess.run", return_value=failed):
                with pytest.raises(ClipboardCopyError, match="xclip exited with 2"):
                    copy_to_clipboard("x")

    def test_invocation_error(self):
        with patch("sendtoai.clipboard.shutil.which", side_effect=_which_only("pbcopy")):
            with patch("sendtoai.clipboard.subprocess.run", side_effect=PermissionError("denied")):
                with pytest.raises(ClipboardCopyError, match="denied"):
                    copy_to_clipboard("x")

    def test_timeout(self):
        with patch("sendtoai.clipboard.shutil.which", side_effect=_which_only("wl-copy")):
            with patch("sendtoai.clipboard.subprocess.run", side_effect=subprocess.TimeoutExpired("wl-copy", 2)):
                with pytest.raises(ClipboardCopyError, match="timed out"):
                    copy_to_clipboard("x", timeout=2)
