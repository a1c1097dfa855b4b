"""Tests for memoized asset resolution."""

import threading
from unittest.mock import patch

import pytest

from asset_paths.asset_errors import AssetNotFoundError
from asset_paths.asset_resolver import AssetResolver
from asset_paths.declaration_tree import DeclarationTree
from asset_paths.tree_builder import DeclarationTreeBuilder

BASE = "https://example/"


@pytest.fixture
def tree() -> DeclarationTree:
    """Fixture providing a tree shaped like the built-in catalog."""
    builder = DeclarationTreeBuilder()
    swf = builder.group("MoviestarplanetSwf")
    components = builder.group("MoviestarplanetComponents")
    login = builder.group("Login", parent=components)
    constants = builder.group("Constants", participates_in_path=False)
    builder.entry("SchoolYard", "school_yard.swf", group=swf)
    builder.entry("CityBackground", "citybackground.svg", group=login)
    builder.entry("Namespace", group=swf)
    builder.entry("Favicon", "favicon.ico", group=constants)
    return builder.build()


@pytest.fixture
def resolver(tree: DeclarationTree) -> AssetResolver:
    """Fixture providing a fresh resolver."""
    return AssetResolver(tree, BASE)


def test_path_assembly(resolver: AssetResolver) -> None:
    """Verify a single participating group yields one segment."""
    assert (
        resolver.resolve("SchoolYard")
        == "https://example/moviestarplanet-swf/school_yard.swf"
    )


def test_nested_groups_root_first(resolver: AssetResolver) -> None:
    """Verify ancestor segments are ordered root to leaf."""
    assert (
        resolver.resolve("CityBackground")
        == "https://example/moviestarplanet-components/login/citybackground.svg"
    )


def test_non_participating_group_adds_no_segment(resolver: AssetResolver) -> None:
    """Verify organizational groups are skipped."""
    assert resolver.resolve("Favicon") == "https://example//favicon.ico"


def test_namespace_only_entry(resolver: AssetResolver) -> None:
    """Verify an entry without filename ends with a slash."""
    assert resolver.resolve("Namespace") == "https://example/moviestarplanet-swf/"


def test_deterministic_and_cached(resolver: AssetResolver) -> None:
    """Verify repeated calls return the same string from the cache."""
    first = resolver.resolve("SchoolYard")
    with patch.object(resolver, "_compute", wraps=resolver._compute) as compute:
        second = resolver.resolve("SchoolYard")
    assert first == second
    assert first is second
    compute.assert_not_called()
    assert resolver.cache_snapshot() == {"SchoolYard": first}


def test_cached_value_matches_uncached(tree: DeclarationTree) -> None:
    """Verify the stored value equals what a fresh resolver computes."""
    warm = AssetResolver(tree, BASE)
    warm.resolve("CityBackground")
    cold = AssetResolver(tree, BASE)
    assert warm.cache_snapshot()["CityBackground"] == cold.resolve("CityBackground")


def test_unknown_identifier_leaves_cache_untouched(resolver: AssetResolver) -> None:
    """Verify NotFound propagates and nothing is stored."""
    with pytest.raises(AssetNotFoundError):
        resolver.resolve("DoesNotExist")
    assert not resolver.is_cached("DoesNotExist")
    assert resolver.cache_size == 0


def test_custom_segment_namer(tree: DeclarationTree) -> None:
    """Verify callers can supply their own segment naming policy."""
    resolver = AssetResolver(tree, BASE, segment_namer=str.upper)
    assert (
        resolver.resolve("CityBackground")
        == "https://example/MOVIESTARPLANETCOMPONENTS/LOGIN/citybackground.svg"
    )


def test_resolve_all(resolver: AssetResolver, tree: DeclarationTree) -> None:
    """Verify every identifier is resolved and cached once."""
    resolved = resolver.resolve_all()
    assert list(resolved) == tree.identifiers()
    assert resolver.cache_size == len(tree)


def test_concurrent_race(resolver: AssetResolver) -> None:
    """Verify racing threads compute once and all see the same value."""
    n_threads = 16
    barrier = threading.Barrier(n_threads)
    results: list[str] = []
    results_lock = threading.Lock()

    def worker() -> None:
        barrier.wait()
        url = resolver.resolve("CityBackground")
        with results_lock:
            results.append(url)

    with patch.object(resolver, "_compute", wraps=resolver._compute) as compute:
        threads = [threading.Thread(target=worker) for _ in range(n_threads)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

    assert len(results) == n_threads
    assert len(set(results)) == 1
    assert compute.call_count == 1
    assert resolver.cache_snapshot() == {"CityBackground": results[0]}
