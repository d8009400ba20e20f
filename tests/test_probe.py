"""Test external process probes."""

import subprocess
from unittest.mock import patch

import pytest

from detect_agent.tools import probe


def completed(stdout: bytes = b"", returncode: int = 0) -> subprocess.CompletedProcess:
    """Build a finished process result."""
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=b"")


@pytest.fixture
def mock_run():
    """Patch subprocess.run inside the probe module."""
    with patch("detect_agent.tools.probe.subprocess.run") as mock:
        yield mock


def test_finder_command():
    """Lookup command depends on the platform."""
    assert probe.finder_command("win32") == "where"
    assert probe.finder_command("linux") == "which"
    assert probe.finder_command("darwin") == "which"


def test_locate_found(mock_run):
    """Located path is trimmed."""
    mock_run.return_value = completed(b"/usr/local/bin/cursor\n")

    assert probe.locate("cursor") == "/usr/local/bin/cursor"

    args, kwargs = mock_run.call_args
    assert args[0] == [probe.finder_command(), "cursor"]
    assert kwargs["timeout"] == 5.0
    assert kwargs["stdin"] == subprocess.DEVNULL


def test_locate_returns_first_line(mock_run):
    """Only the first reported path is kept."""
    mock_run.return_value = completed(
        b"  C:\\Tools\\codex.cmd\r\nC:\\Other\\codex.exe\r\n"
    )
    assert probe.locate("codex") == "C:\\Tools\\codex.cmd"


def test_locate_empty_output(mock_run):
    """Whitespace-only output means not found."""
    mock_run.return_value = completed(b"  \n")
    assert probe.locate("gemini") is None


def test_locate_nonzero_exit(mock_run):
    """Non-zero exit means not found."""
    mock_run.return_value = completed(b"", returncode=1)
    assert probe.locate("gemini") is None


def test_locate_timeout(mock_run):
    """Timeouts are reported as not found."""
    mock_run.side_effect = subprocess.TimeoutExpired(cmd="which", timeout=5.0)
    assert probe.locate("gemini") is None


def test_locate_launch_failure(mock_run):
    """A missing finder is reported as not found."""
    mock_run.side_effect = FileNotFoundError("which")
    assert probe.locate("gemini") is None


def test_locate_custom_timeout(mock_run):
    """Timeout is passed through to the process."""
    mock_run.return_value = completed(b"/bin/qoder")
    probe.locate("qoder", timeout=1.5)
    assert mock_run.call_args.kwargs["timeout"] == 1.5


def test_get_version(mock_run):
    """Version output is trimmed but otherwise untouched."""
    mock_run.return_value = completed(b"0.47.0\nabcdef123 (commit)\n")

    assert probe.get_version("cursor") == "0.47.0\nabcdef123 (commit)"
    assert mock_run.call_args.args[0] == ["cursor", "--version"]


def test_get_version_custom_arg(mock_run):
    """Alternative version arguments are used."""
    mock_run.return_value = completed(b"v2")
    probe.get_version("tool", version_arg="-V")
    assert mock_run.call_args.args[0] == ["tool", "-V"]


def test_get_version_empty(mock_run):
    """Empty output gives no version."""
    mock_run.return_value = completed(b"")
    assert probe.get_version("copilot") is None


def test_get_version_failure(mock_run):
    """Failing version query gives no version."""
    mock_run.return_value = completed(b"1.0.0", returncode=2)
    assert probe.get_version("copilot") is None


def test_get_version_timeout(mock_run):
    """Hanging version query gives no version."""
    mock_run.side_effect = subprocess.TimeoutExpired(cmd="copilot", timeout=5.0)
    assert probe.get_version("copilot") is None


def test_get_version_permission_error(mock_run):
    """Process spawn errors give no version."""
    mock_run.side_effect = PermissionError("denied")
    assert probe.get_version("copilot") is None


def test_get_version_undecodable_output(mock_run):
    """Invalid UTF-8 is replaced rather than raising."""
    mock_run.return_value = completed(b"1.0\xff")
    assert probe.get_version("windsurf").startswith("1.0")


def test_real_missing_command():
    """A command that does not exist is not located."""
    assert probe.locate("detect-agent-no-such-command-xyz") is None
    assert probe.get_version("detect-agent-no-such-command-xyz") is None
