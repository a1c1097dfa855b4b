"""Data model for a terminal asset declaration."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AssetEntry:
    """Represents a named asset and the file it points to."""

    identifier: str
    filename: str | None  # None for namespace-only declarations
    group: str | None  # owning group key, None for the root
