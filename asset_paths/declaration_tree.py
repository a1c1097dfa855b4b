"""Read-only index over declared asset groups and entries."""

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from asset_paths.asset_entry import AssetEntry
from asset_paths.asset_errors import AssetNotFoundError
from asset_paths.asset_group import AssetGroup


class DeclarationTree:
    """Looks up entries by identifier and walks their enclosing groups.

    The tree is assembled once (see ``DeclarationTreeBuilder``) and never
    changes afterwards, so it is safe to share between threads.
    """

    def __init__(
        self,
        groups: Mapping[str, AssetGroup],
        entries: Mapping[str, AssetEntry],
    ) -> None:
        """Freeze the given group and entry tables."""
        self.groups = MappingProxyType(dict(groups))
        self.entries = MappingProxyType(dict(entries))

    def __contains__(self, identifier: object) -> bool:
        return identifier in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def identifiers(self) -> list[str]:
        """Return every entry identifier in declaration order."""
        return list(self.entries)

    def get_entry(self, identifier: str) -> AssetEntry:
        """Return the entry declared under ``identifier``."""
        entry = self.entries.get(identifier)
        if entry is None:
            raise AssetNotFoundError(identifier)
        return entry

    def get_filename(self, identifier: str) -> str | None:
        """Return the declared filename of an entry, if any."""
        return self.get_entry(identifier).filename

    def get_ancestors(self, identifier: str) -> list[AssetGroup]:
        """Return the groups enclosing an entry, innermost first.

        The unnamed root is not part of the chain.
        """
        chain: list[AssetGroup] = []
        key = self.get_entry(identifier).group
        while key is not None:
            group = self.groups[key]
            chain.append(group)
            key = group.parent
        return chain
