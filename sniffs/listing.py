# Sniff listing: run `phpcs --standard=... -e` and pick the sniff names out of its output.

import logging
from typing import Iterable, List, Sequence

from sniffs.config import DEFAULT_TIMEOUT
from sniffs.errors import ListingFailed
from sniffs.process import Runner, run_command

logger = logging.getLogger(__name__)


def has_standard_prefix(line: str, standards: Iterable[str]) -> bool:
    """
    True if line starts with "<standard>." for any of the standards.

    The trailing dot matters: without it PSR1 would also claim every
    PSR12 sniff, and headers that merely mention a standard would pass.
    """
    return any(line.startswith(f"{standard}.") for standard in standards)


def parse_sniffs(output: str, standards: Sequence[str]) -> List[str]:
    """
    Return the unique sniff names found in the listing output.

    Lines are trimmed; blank lines, headers and anything else that does not
    start with a standard prefix are dropped. Duplicates keep their first
    position. Deprecation markers (" *") are left attached.
    """
    seen = set()
    sniffs: List[str] = []
    for raw in output.splitlines():
        line = raw.strip()
        if not has_standard_prefix(line, standards):
            continue
        if line in seen:
            continue
        seen.add(line)
        sniffs.append(line)

    logger.debug("Parsed %d unique sniff(s) from %d line(s)", len(sniffs), len(output.splitlines()))
    return sniffs


def build_listing_command(phpcs_path: str, standards: Sequence[str]) -> List[str]:
    """Return the argv that makes phpcs explain every sniff of the given standards."""
    return [phpcs_path, f"--standard={','.join(standards)}", "-e"]


def get_sniffs_from_standards(
    phpcs_path: str,
    standards: Sequence[str],
    runner: Runner = run_command,
    timeout: float = DEFAULT_TIMEOUT,
) -> str:
    """
    Return the raw listing text for the given standards.

    Raises:
        ListingFailed: if phpcs printed nothing.
    """
    output = runner(build_listing_command(phpcs_path, standards), timeout=timeout)
    if output is None or not output.strip():
        raise ListingFailed()
    return output
