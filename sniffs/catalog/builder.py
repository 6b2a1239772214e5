# Catalog building: assign each parsed sniff to its standard and split out deprecated ones.

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from sniffs.catalog.models import DEPRECATED_MARKER, Catalog, Sniff, StandardSniffs
from sniffs.errors import UnclassifiedSniff

logger = logging.getLogger(__name__)


def find_owning_standard(sniff: str, standards: Sequence[str]) -> str:
    """
    Return the first standard (in discovery order) whose "<name>." prefixes sniff.

    Matching on the dotted prefix keeps PSR1 from claiming PSR12 sniffs; the
    order only breaks ties that the dot cannot.

    Raises:
        UnclassifiedSniff: if no standard matches.
    """
    for standard in standards:
        if sniff.startswith(f"{standard}."):
            return standard
    raise UnclassifiedSniff(sniff, standards)


def is_sniff_deprecated(sniff: str) -> bool:
    """phpcs -e marks deprecated sniffs with a trailing " *"."""
    return sniff.endswith(DEPRECATED_MARKER)


def strip_deprecation_marker(sniff: str) -> str:
    """Remove exactly one trailing deprecation marker, if present."""
    if is_sniff_deprecated(sniff):
        return sniff[: -len(DEPRECATED_MARKER)]
    return sniff


def classify_sniff(sniff: str) -> Sniff:
    """Turn a raw listing name into a Sniff with the marker stripped."""
    deprecated = is_sniff_deprecated(sniff)
    return Sniff(name=strip_deprecation_marker(sniff), deprecated=deprecated)


def group_sniffs_by_standard(sniffs: Iterable[str], standards: Sequence[str]) -> Catalog:
    """
    Build the catalog from parsed sniff names.

    Every standard gets an entry, in the given order. Sniffs keep their
    arrival order within the active and deprecated lists of their owner.
    """
    grouped = {standard: StandardSniffs() for standard in standards}

    for raw in sniffs:
        owner = find_owning_standard(raw, standards)
        sniff = classify_sniff(raw)
        entry = grouped[owner]
        if sniff.deprecated:
            entry.deprecated.append(sniff.name)
        else:
            entry.active.append(sniff.name)
        logger.debug("%s -> %s%s", sniff.name, owner, " (deprecated)" if sniff.deprecated else "")

    catalog = Catalog(standards=grouped)
    logger.info(
        "Catalogued %d active and %d deprecated sniff(s) across %d standard(s)",
        catalog.total_active(),
        catalog.total_deprecated(),
        len(grouped),
    )
    return catalog
