"""Logic for building a declaration tree from YAML or plain mappings.

Catalog format::

    MoviestarplanetSwf:
      SchoolYard: school_yard.swf
    Constants:
      _in_path: false
      Namespace: null

Mappings are groups, string or null values are entries. ``_in_path: false``
keeps a group out of the URL.
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from asset_paths.asset_errors import CatalogError
from asset_paths.declaration_tree import DeclarationTree
from asset_paths.tree_builder import DeclarationTreeBuilder

logger = logging.getLogger(__name__)

IN_PATH_KEY = "_in_path"


def build_tree_from_mapping(data: dict[str, Any]) -> DeclarationTree:
    """Build a tree from a nested mapping of groups and entries."""
    if not isinstance(data, dict):
        msg = f"Catalog root must be a mapping, got {type(data).__name__}"
        raise CatalogError(msg)
    builder = DeclarationTreeBuilder()
    _add_members(builder, data, None)
    return builder.build()


def load_catalog(path: str | Path) -> DeclarationTree:
    """Load a catalog YAML file into a tree."""
    p = Path(path)
    data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    tree = build_tree_from_mapping(data)
    logger.info("Loaded %d assets from %s", len(tree), p)
    return tree


def _add_members(
    builder: DeclarationTreeBuilder,
    members: dict[str, Any],
    parent: str | None,
) -> None:
    for raw_name, value in members.items():
        if raw_name == IN_PATH_KEY:
            continue
        name = str(raw_name)
        if isinstance(value, dict):
            in_path = value.get(IN_PATH_KEY, True)
            if not isinstance(in_path, bool):
                msg = f"{IN_PATH_KEY} of group {name} must be true or false"
                raise CatalogError(msg)
            key = builder.group(name, parent=parent, participates_in_path=in_path)
            _add_members(builder, value, key)
        elif value is None or isinstance(value, str):
            builder.entry(name, value, group=parent)
        else:
            msg = (
                f"Asset {name} must map to a filename or a group, "
                f"got {type(value).__name__}"
            )
            raise CatalogError(msg)
