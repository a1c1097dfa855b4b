"""Memoized resolution of asset identifiers to remote URLs."""

import logging
import threading
from collections.abc import Callable

from asset_paths.compose_asset_path import compose_asset_path
from asset_paths.declaration_tree import DeclarationTree
from asset_paths.segment_name import segment_name

logger = logging.getLogger(__name__)


class AssetResolver:
    """Turns an entry identifier into ``base_url/segment/.../filename``.

    Results are cached per identifier for the lifetime of the resolver. The
    declaration tree is static, so nothing is ever evicted. Safe to call from
    many threads at once.
    """

    def __init__(
        self,
        tree: DeclarationTree,
        base_url: str,
        *,
        segment_namer: Callable[[str], str] = segment_name,
    ) -> None:
        """Bind the resolver to a tree, a base URL and a segment naming rule."""
        self.tree = tree
        self.base_url = base_url
        self.segment_namer = segment_namer

        # State
        self._cache: dict[str, str] = {}  # identifier -> url
        self._lock = threading.Lock()

    def resolve(self, identifier: str) -> str:
        """Return the URL for ``identifier``, computing it on first use.

        Raises ``AssetNotFoundError`` for undeclared identifiers without
        touching the cache.
        """
        # 1. Cache Check (plain dict reads are atomic)
        cached = self._cache.get(identifier)
        if cached is not None:
            return cached

        with self._lock:
            # Another thread may have filled it while we waited.
            cached = self._cache.get(identifier)
            if cached is not None:
                return cached

            # 2. Compute and register
            url = self._compute(identifier)
            self._cache[identifier] = url

        logger.debug("Resolved asset %s -> %s", identifier, url)
        return url

    def resolve_all(self) -> dict[str, str]:
        """Resolve every declared identifier, in declaration order."""
        return {uid: self.resolve(uid) for uid in self.tree.identifiers()}

    def is_cached(self, identifier: str) -> bool:
        """Return whether ``identifier`` has already been resolved."""
        return identifier in self._cache

    def cache_snapshot(self) -> dict[str, str]:
        """Return a copy of the memoization table."""
        with self._lock:
            return dict(self._cache)

    @property
    def cache_size(self) -> int:
        """Number of identifiers resolved so far."""
        return len(self._cache)

    def _compute(self, identifier: str) -> str:
        filename = self.tree.get_filename(identifier)
        segments = [
            self.segment_namer(group.name)
            for group in self.tree.get_ancestors(identifier)
            if group.participates_in_path
        ]
        # Ancestors come innermost first; URLs read root first.
        segments.reverse()
        return compose_asset_path(self.base_url, segments, filename)
