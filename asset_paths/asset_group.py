"""Data model for a group in the asset declaration hierarchy."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AssetGroup:
    """Represents an organizational node that may contribute a path segment."""

    name: str
    key: str  # dotted position, e.g. MoviestarplanetComponents.Login
    parent: str | None  # parent group key, None for top-level groups
    participates_in_path: bool = True
