"""Explicit registration of asset groups and entries."""

from asset_paths.asset_entry import AssetEntry
from asset_paths.asset_errors import CatalogError, DuplicateAssetError
from asset_paths.asset_group import AssetGroup
from asset_paths.declaration_tree import DeclarationTree


class DeclarationTreeBuilder:
    """Collects declarations and produces an immutable ``DeclarationTree``.

    Parents must be registered before their children, which keeps every
    ancestor chain finite.
    """

    def __init__(self) -> None:
        """Start with an empty root."""
        self._groups: dict[str, AssetGroup] = {}
        self._entries: dict[str, AssetEntry] = {}

    def group(
        self,
        name: str,
        *,
        parent: str | None = None,
        participates_in_path: bool = True,
    ) -> str:
        """Register a group and return its key for use as a parent."""
        if not name:
            msg = "Group name must not be empty"
            raise CatalogError(msg)
        if "." in name:
            msg = f"Group name {name} must not contain '.'"
            raise CatalogError(msg)
        self._require_group(parent)
        key = f"{parent}.{name}" if parent else name
        if key in self._groups:
            msg = f"Group {key} declared twice"
            raise DuplicateAssetError(msg)
        self._groups[key] = AssetGroup(
            name=name,
            key=key,
            parent=parent,
            participates_in_path=participates_in_path,
        )
        return key

    def entry(
        self,
        identifier: str,
        filename: str | None = None,
        *,
        group: str | None = None,
    ) -> AssetEntry:
        """Register an entry under ``group`` (the root when omitted)."""
        if not identifier:
            msg = "Entry identifier must not be empty"
            raise CatalogError(msg)
        self._require_group(group)
        if identifier in self._entries:
            existing = self._entries[identifier]
            msg = (
                f"Asset {identifier} declared twice "
                f"(in {existing.group or '<root>'} and {group or '<root>'})"
            )
            raise DuplicateAssetError(msg)
        entry = AssetEntry(identifier=identifier, filename=filename, group=group)
        self._entries[identifier] = entry
        return entry

    def build(self) -> DeclarationTree:
        """Freeze the collected declarations."""
        return DeclarationTree(self._groups, self._entries)

    def _require_group(self, key: str | None) -> None:
        if key is not None and key not in self._groups:
            msg = f"Unknown parent group: {key}"
            raise CatalogError(msg)
