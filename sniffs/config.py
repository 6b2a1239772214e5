from __future__ import annotations

"""
Run configuration: where phpcs lives, how long to wait for it, and how the
catalog is shown.

The CLI in main.py builds a Config from its options; everything else takes a
Config (or the default one) rather than reading options or the environment.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_TIMEOUT = 60.0


@dataclass
class Config:
    """
    Settings for one sniff-listing run.

    phpcs_path overrides the PATH search done by locator.where_phpcs().
    timeout bounds each phpcs invocation, in seconds.
    include_empty controls whether standards without any sniffs are rendered.
    """

    phpcs_path: Optional[Path] = None
    timeout: float = DEFAULT_TIMEOUT
    include_empty: bool = True


def get_default_config() -> Config:
    """Return the configuration used when no CLI options are given."""
    return Config()
