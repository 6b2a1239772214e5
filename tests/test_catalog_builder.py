"""Unit tests for sniffs.catalog.builder: ownership, deprecation and grouping."""

import pytest

from sniffs.catalog.builder import (
    classify_sniff,
    find_owning_standard,
    group_sniffs_by_standard,
    is_sniff_deprecated,
    strip_deprecation_marker,
)
from sniffs.errors import UnclassifiedSniff
from sniffs.listing import parse_sniffs


def test_prefix_disambiguation_psr1_psr12():
    """PSR12 sniffs belong to PSR12 even when PSR1 is listed first."""
    assert find_owning_standard("PSR12.Files.FileHeader", ["PSR1", "PSR12"]) == "PSR12"
    assert find_owning_standard("PSR1.Files.SideEffects", ["PSR1", "PSR12"]) == "PSR1"


def test_first_matching_standard_wins():
    assert find_owning_standard("A.B.C", ["X", "A", "A"]) == "A"


def test_unclassified_sniff_raises():
    with pytest.raises(UnclassifiedSniff) as exc_info:
        find_owning_standard("PSR2.Classes.ClassDeclaration", ["PSR1"])
    assert exc_info.value.sniff == "PSR2.Classes.ClassDeclaration"
    assert exc_info.value.standards == ["PSR1"]
    assert "doesn't seem to belong" in str(exc_info.value)


def test_is_sniff_deprecated():
    assert is_sniff_deprecated("PSR1.Files.SideEffects *")
    assert not is_sniff_deprecated("PSR1.Files.SideEffects")
    # Only the exact " *" suffix counts
    assert not is_sniff_deprecated("PSR1.Files.SideEffects*")


def test_strip_deprecation_marker_exact():
    assert strip_deprecation_marker("PSR1.Files.SideEffects *") == "PSR1.Files.SideEffects"
    assert strip_deprecation_marker("PSR1.Files.SideEffects") == "PSR1.Files.SideEffects"
    # Only one trailing marker is removed
    assert strip_deprecation_marker("PSR1.A.B * *") == "PSR1.A.B *"


def test_classify_sniff():
    deprecated = classify_sniff("Squiz.WhiteSpace.LanguageConstructSpacing *")
    assert deprecated.name == "Squiz.WhiteSpace.LanguageConstructSpacing"
    assert deprecated.deprecated is True

    active = classify_sniff("Squiz.Arrays.ArrayDeclaration")
    assert active.name == "Squiz.Arrays.ArrayDeclaration"
    assert active.deprecated is False


def test_group_preserves_order_and_splits_deprecated():
    sniffs = [
        "PSR2.Classes.ClassDeclaration",
        "PSR2.Files.ClosingTag *",
        "PSR2.Files.EndFileNewline",
        "PSR12.Files.FileHeader",
    ]
    catalog = group_sniffs_by_standard(sniffs, ["PSR1", "PSR2", "PSR12"])

    assert catalog.names() == ["PSR1", "PSR2", "PSR12"]
    assert catalog["PSR2"].active == ["PSR2.Classes.ClassDeclaration", "PSR2.Files.EndFileNewline"]
    assert catalog["PSR2"].deprecated == ["PSR2.Files.ClosingTag"]
    assert catalog["PSR12"].active == ["PSR12.Files.FileHeader"]
    assert catalog["PSR12"].deprecated == []
    assert catalog["PSR1"].active == []
    assert catalog["PSR1"].deprecated == []


def test_every_sniff_owned_exactly_once():
    listing = """
    PEAR.Commenting.FileComment
    PSR1.Files.SideEffects *
    PSR12.Files.FileHeader
    PSR12.Files.FileHeader
    PSR2.Methods.FunctionCallSignature
    PSR2.Namespaces.UseDeclaration *
    """
    standards = ["PEAR", "PSR1", "PSR2", "PSR12"]
    parsed = parse_sniffs(listing, standards)
    catalog = group_sniffs_by_standard(parsed, standards)

    placed = []
    for standard, entry in catalog.standards.items():
        assert not set(entry.active) & set(entry.deprecated)
        placed.extend(entry.active)
        placed.extend(entry.deprecated)

    assert sorted(placed) == sorted(strip_deprecation_marker(s) for s in parsed)
    assert len(placed) == len(set(placed)) == 5


def test_group_inconsistent_inputs_raises():
    """Sniffs parsed against one standards list and grouped against another."""
    with pytest.raises(UnclassifiedSniff):
        group_sniffs_by_standard(["PSR2.Classes.ClassDeclaration"], ["PSR1"])


def test_group_empty():
    catalog = group_sniffs_by_standard([], ["PSR1"])
    assert catalog["PSR1"].active == []
    assert catalog.total_active() == 0
