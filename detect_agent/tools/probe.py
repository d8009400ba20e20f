"""External process probes used to detect tools.

Both probes are total: any failure to launch, non-zero exit or timeout is
reported as ``None`` instead of an exception.
"""

import logging
import subprocess
import sys
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 5.0  # seconds, per probe call


def finder_command(platform: Optional[str] = None) -> str:
    """Get the executable lookup command for a platform.

    Args:
        platform: Platform name as in ``sys.platform``. Defaults to the host.

    Returns:
        ``where`` on Windows, ``which`` everywhere else.
    """
    platform = platform or sys.platform
    return "where" if platform.startswith("win") else "which"


def _run(args: list[str], timeout: float) -> Optional[str]:
    """Run a command and return its trimmed stdout, or None on any failure."""
    try:
        result = subprocess.run(
            args,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired:
        logger.debug(f"Probe timed out after {timeout}s: {' '.join(args)}")
        return None
    except (OSError, ValueError) as e:
        logger.debug(f"Probe could not start: {' '.join(args)}: {e}")
        return None

    if result.returncode != 0:
        logger.debug(f"Probe exited with {result.returncode}: {' '.join(args)}")
        return None

    output = result.stdout.decode("utf-8", errors="replace").strip()
    return output or None


def locate(command: str, timeout: float = DEFAULT_TIMEOUT) -> Optional[str]:
    """Find the executable path of a command.

    Args:
        command: Command name to look up.
        timeout: Seconds to wait for the lookup.

    Returns:
        First path reported by the platform finder, or None if not found.
    """
    output = _run([finder_command(), command], timeout)
    if output is None:
        return None
    return output.splitlines()[0].strip() or None


def get_version(
    command: str,
    timeout: float = DEFAULT_TIMEOUT,
    version_arg: str = "--version",
) -> Optional[str]:
    """Ask a command for its version.

    The output is returned as-is apart from trimming; it may span several
    lines.

    Args:
        command: Command name or located executable path to run.
        timeout: Seconds to wait for the command.
        version_arg: Argument that makes the command print its version.

    Returns:
        Version text, or None if the command failed or printed nothing.
    """
    return _run([command, version_arg], timeout)
