# Error kinds raised while listing sniffs.
# SniffsError subclasses are user-facing and end the run with a message;
# UnclassifiedSniff signals an internal inconsistency and is never caught.

from __future__ import annotations

from typing import Sequence


class SniffsError(Exception):
    """Base class for failures that are reported to the user and abort the run."""


class ExecutableNotFound(SniffsError):
    """The phpcs executable could not be located on this host."""


class NoStandardsFound(SniffsError):
    """`phpcs -i` produced no usable list of installed standards."""

    def __init__(self, message: str = "No installed standards found.") -> None:
        super().__init__(message)


class ListingFailed(SniffsError):
    """`phpcs --standard=... -e` produced no output."""

    def __init__(self, message: str = "Failed to retrieve sniffs from standards.") -> None:
        super().__init__(message)


class UnclassifiedSniff(RuntimeError):
    """
    A parsed sniff name does not start with any known standard prefix.

    Every name reaching the catalog already passed the same prefix filter, so
    this means the parser and the builder were given inconsistent inputs.
    """

    def __init__(self, sniff: str, standards: Sequence[str]) -> None:
        self.sniff = sniff
        self.standards = list(standards)
        super().__init__(
            f"Sniff '{sniff}' doesn't seem to belong to any standards: "
            f"'{', '.join(self.standards)}'"
        )
