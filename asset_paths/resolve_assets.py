"""Print resolved asset URLs for declared identifiers."""

import argparse
import logging
from typing import Any

from asset_paths.asset_errors import AssetNotFoundError, CatalogError, ConfigError
from asset_paths.asset_resolver import AssetResolver
from asset_paths.default_catalog import Assets
from asset_paths.load_catalog import build_tree_from_mapping
from asset_paths.load_config import load_config


def build_resolver(config: dict[str, Any]) -> AssetResolver:
    """Create a resolver for the configured catalog and base URL."""
    catalog = config.get("catalog") or {}
    tree = build_tree_from_mapping(catalog) if catalog else Assets.resolver.tree
    return AssetResolver(tree, config["base_url"])


def run(args: argparse.Namespace) -> int:
    """Resolve the requested identifiers and print one line per asset."""
    try:
        config = load_config(args.config)
        if args.base_url:
            config["base_url"] = args.base_url
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else config["log_level"],
            format="%(levelname)s %(name)s: %(message)s",
        )
        resolver = build_resolver(config)
    except ConfigError as e:
        raise SystemExit(f"Invalid config: {e}") from e
    except CatalogError as e:
        raise SystemExit(f"Invalid catalog: {e}") from e

    if args.all:
        resolved = resolver.resolve_all()
    else:
        if not args.identifiers:
            msg = "No identifiers given (use --all to list every asset)"
            raise SystemExit(msg)
        try:
            resolved = {uid: resolver.resolve(uid) for uid in args.identifiers}
        except AssetNotFoundError as e:
            raise SystemExit(str(e)) from e

    for uid, url in resolved.items():
        print(f"{uid}\t{url}")
    return 0


def main() -> int:
    """Parse arguments and run."""
    ap = argparse.ArgumentParser(
        description="Resolve declared asset identifiers to their remote URLs.",
    )
    ap.add_argument(
        "identifiers",
        nargs="*",
        help="Asset identifiers to resolve (e.g. SchoolYard)",
    )
    ap.add_argument(
        "--all",
        action="store_true",
        help="Resolve every declared asset",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    ap.add_argument(
        "--base-url",
        help="Override the configured base URL",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = ap.parse_args()
    return run(args)


if __name__ == "__main__":
    raise SystemExit(main())
