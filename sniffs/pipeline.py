from __future__ import annotations

"""
Orchestration of a sniff-listing run.

The run moves through a fixed sequence of stages and never goes back:

    START -> STANDARDS_DISCOVERED -> SNIFFS_LISTED -> PARSED -> CATALOGUED -> DONE

Locating phpcs and running it are injected (locator, runner), so the whole
pipeline can be driven from literal fixture strings in tests.
"""

import logging
from enum import Enum
from typing import Callable, Optional

from sniffs.catalog.builder import group_sniffs_by_standard
from sniffs.catalog.models import Catalog
from sniffs.config import Config, get_default_config
from sniffs.discovery import get_installed_standards
from sniffs.listing import get_sniffs_from_standards, parse_sniffs
from sniffs.locator import resolve_phpcs
from sniffs.process import Runner, run_command

logger = logging.getLogger(__name__)

Locator = Callable[[], str]


class Stage(str, Enum):
    START = "start"
    STANDARDS_DISCOVERED = "standards-discovered"
    SNIFFS_LISTED = "sniffs-listed"
    PARSED = "parsed"
    CATALOGUED = "catalogued"
    DONE = "done"


def default_locator(config: Config) -> Locator:
    """Return a locator that honours config.phpcs_path before searching PATH."""
    return lambda: resolve_phpcs(config.phpcs_path)


def _enter(stage: Stage) -> Stage:
    logger.debug("Stage: %s", stage.value)
    return stage


def list_phpcs_sniffs(
    config: Optional[Config] = None,
    *,
    runner: Runner = run_command,
    locator: Optional[Locator] = None,
) -> Catalog:
    """
    Discover installed standards, list their sniffs and return the catalog.

    Raises:
        ExecutableNotFound: phpcs could not be located.
        NoStandardsFound: `phpcs -i` gave nothing usable.
        ListingFailed: `phpcs --standard=... -e` gave nothing.
        UnclassifiedSniff: a parsed sniff matched no standard (internal error).
    """
    if config is None:
        config = get_default_config()
    if locator is None:
        locator = default_locator(config)

    phpcs = locator()
    _enter(Stage.START)

    standards = get_installed_standards(phpcs, runner=runner, timeout=config.timeout)
    _enter(Stage.STANDARDS_DISCOVERED)

    output = get_sniffs_from_standards(phpcs, standards, runner=runner, timeout=config.timeout)
    _enter(Stage.SNIFFS_LISTED)

    sniffs = parse_sniffs(output, standards)
    _enter(Stage.PARSED)

    catalog = group_sniffs_by_standard(sniffs, standards)
    _enter(Stage.CATALOGUED)

    _enter(Stage.DONE)
    return catalog
