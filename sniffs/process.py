# Process runner: execute a phpcs command and return its captured stdout.
# No parsing happens here; callers only learn whether output came back.

import logging
import subprocess
from typing import Optional, Protocol, Sequence

from sniffs.config import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)


class Runner(Protocol):
    """Callable that runs a command and returns its stdout, or None on failure."""

    def __call__(self, args: Sequence[str], *, timeout: float = ...) -> Optional[str]: ...


def run_command(args: Sequence[str], *, timeout: float = DEFAULT_TIMEOUT) -> Optional[str]:
    """
    Run args (no shell) and return captured stdout as text.

    Args:
        args: Executable followed by its arguments.
        timeout: Seconds to wait before the process is killed.

    Output is decoded as UTF-8; undecodable bytes become U+FFFD rather than
    failing the run.

    Returns:
        The stdout text, or None if the process could not be started, timed
        out, or printed nothing. The exit code is logged but not inspected:
        phpcs may exit non-zero while still printing a usable listing.
    """
    command = list(args)
    if not command:
        raise ValueError("run_command requires at least one argument")

    try:
        result = subprocess.run(
            command,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired:
        logger.error("Command timed out after %.1fs: %s", timeout, " ".join(command))
        return None
    except OSError as e:
        logger.error("Failed to run %s: %s", command[0], e)
        return None

    if result.returncode != 0:
        logger.debug("Command %s exited with code %d", " ".join(command), result.returncode)

    if not result.stdout or not result.stdout.strip():
        logger.warning("Command produced no output: %s", " ".join(command))
        return None

    logger.debug("Command %s returned %d line(s)", command[0], len(result.stdout.splitlines()))
    return result.stdout
