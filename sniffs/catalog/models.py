# Pydantic data models for the sniff catalog: Sniff, StandardSniffs, Catalog.

from typing import Dict, Iterator, List

from pydantic import BaseModel, Field, field_validator

DEPRECATED_MARKER = " *"


class Sniff(BaseModel):
    """A single sniff name (e.g. PSR2.Classes.ClassDeclaration) and whether it is deprecated."""

    name: str = Field(..., min_length=1, description="Qualified name without the deprecation marker")
    deprecated: bool = False

    @field_validator("name")
    @classmethod
    def _no_marker(cls, value: str) -> str:
        if value.endswith(DEPRECATED_MARKER):
            raise ValueError(f"sniff name still carries the deprecation marker: {value!r}")
        return value


class StandardSniffs(BaseModel):
    """The sniffs owned by one standard, split into active and deprecated."""

    active: List[str] = Field(default_factory=list)
    deprecated: List[str] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.active) + len(self.deprecated)


class Catalog(BaseModel):
    """
    All sniffs grouped by owning standard.

    Keys are in discovery order and every discovered standard has an entry,
    even when it owns no sniffs. Both lists are always present, possibly empty.
    """

    standards: Dict[str, StandardSniffs] = Field(default_factory=dict)

    def __getitem__(self, standard: str) -> StandardSniffs:
        return self.standards[standard]

    def __contains__(self, standard: object) -> bool:
        return standard in self.standards

    def names(self) -> List[str]:
        return list(self.standards)

    def total_active(self) -> int:
        return sum(len(s.active) for s in self.standards.values())

    def total_deprecated(self) -> int:
        return sum(len(s.deprecated) for s in self.standards.values())

    def all_sniffs(self) -> Iterator[Sniff]:
        """Yield every sniff, standard by standard, active ones first."""
        for entry in self.standards.values():
            for name in entry.active:
                yield Sniff(name=name)
            for name in entry.deprecated:
                yield Sniff(name=name, deprecated=True)
