"""
Executable lookup: find the phpcs binary for the current platform.

phpcs is normally installed globally through Composer, which puts a `phpcs`
script on PATH (plus a `phpcs.bat` wrapper on Windows). The lookup is kept
out of the pipeline so tests can inject a fake locator instead of depending
on the host.

Typical usage:
    from sniffs.locator import find_os, where_phpcs

    phpcs = where_phpcs(find_os())
"""

import logging
import shutil
import sys
from pathlib import Path, PurePath, PureWindowsPath
from typing import Callable, Optional, Tuple

from sniffs.errors import ExecutableNotFound

logger = logging.getLogger(__name__)

WINDOWS = "Win"
UNIX = "Unix"

# Names tried in order for each platform family
CANDIDATE_NAMES = {
    WINDOWS: ("phpcs.bat", "phpcs"),
    UNIX: ("phpcs",),
}

INSTALL_HINT = (
    "Please either install `squizlabs/php_codesniffer` globally via Composer "
    "or manually add the phpcs path into the system's environment PATH."
)

Which = Callable[[str], Optional[str]]


def find_os(platform: Optional[str] = None) -> str:
    """
    Return the platform family: "Win" for Windows, "Unix" for everything else.

    Args:
        platform: A sys.platform style string; defaults to the running host.
    """
    if platform is None:
        platform = sys.platform
    return WINDOWS if platform[:3].lower() == "win" else UNIX


def _candidate_names(os_family: str) -> Tuple[str, ...]:
    try:
        return CANDIDATE_NAMES[os_family]
    except KeyError:
        raise ValueError(f"Unknown platform family: {os_family!r}") from None


def where_phpcs(os_family: str, which: Which = shutil.which) -> str:
    """
    Search PATH for phpcs and return its absolute path.

    Only hits whose file name stem is `phpcs` are accepted, so a wrapper
    such as `phpcs-fixer` found through PATHEXT never wins.

    Raises:
        ExecutableNotFound: if no candidate resolves.
    """
    for name in _candidate_names(os_family):
        found = which(name)
        if found is None:
            logger.debug("%s not found on PATH", name)
            continue
        pure = PureWindowsPath(found) if os_family == WINDOWS else PurePath(found)
        if pure.stem.lower() != "phpcs":
            logger.debug("Ignoring %s: not a phpcs executable", found)
            continue
        logger.info("Using phpcs at %s", found)
        return found

    raise ExecutableNotFound(f"Could not find the phpcs executable on PATH. {INSTALL_HINT}")


def resolve_phpcs(
    configured: Optional[Path] = None,
    os_family: Optional[str] = None,
    which: Which = shutil.which,
) -> str:
    """
    Return the phpcs path to use: the configured one if given, else a PATH search.

    A configured path must point at an existing file; it is returned absolute
    so a bare name is not looked up on PATH again when executed.
    """
    if configured is not None:
        if not configured.is_file():
            raise ExecutableNotFound(f"Configured phpcs path does not exist: {configured}")
        logger.info("Using configured phpcs at %s", configured)
        return str(configured.resolve())

    return where_phpcs(os_family or find_os(), which=which)
