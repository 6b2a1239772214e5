# Standards discovery: turn the `phpcs -i` sentence into a list of standard names.

import logging
import re
from typing import List

from sniffs.config import DEFAULT_TIMEOUT
from sniffs.errors import NoStandardsFound
from sniffs.process import Runner, run_command

logger = logging.getLogger(__name__)

# Tail of "The installed coding standards are PEAR, PSR1, PSR2 and PSR12"
_LIST_MARKER = "are "
_DELIMITER = re.compile(r", | and ")
# What phpcs -i prints when nothing is installed
_NONE_INSTALLED = re.compile(r"^\s*No coding standards are installed", re.IGNORECASE)


def parse_installed_standards(text: str) -> List[str]:
    """
    Extract standard names from the `phpcs -i` output.

    Everything after the first "are " is treated as the list; without that
    fragment the whole text is used. Names are separated by ", " or " and ",
    both of which may appear in the same sentence. Order is preserved.
    """
    idx = text.find(_LIST_MARKER)
    tail = text[idx + len(_LIST_MARKER):] if idx >= 0 else text
    return [token.strip() for token in _DELIMITER.split(tail) if token.strip()]


def get_installed_standards(
    phpcs_path: str,
    runner: Runner = run_command,
    timeout: float = DEFAULT_TIMEOUT,
) -> List[str]:
    """
    Ask phpcs which standards are installed.

    Raises:
        NoStandardsFound: if phpcs printed nothing, reported that no standards are
            installed, or no names could be parsed.
    """
    output = runner([phpcs_path, "-i"], timeout=timeout)
    if output is None or not output.strip():
        raise NoStandardsFound()

    if _NONE_INSTALLED.match(output):
        logger.warning("phpcs reports no installed coding standards")
        raise NoStandardsFound()

    standards = parse_installed_standards(output)
    if not standards:
        logger.warning("Could not parse any standard names from: %r", output)
        raise NoStandardsFound()

    logger.info("Found %d installed standard(s): %s", len(standards), ", ".join(standards))
    return standards
