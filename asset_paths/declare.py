"""Class-based asset declarations.

A catalog is written as nested classes::

    @asset_catalog("https://example/")
    class Assets:
        @asset_group
        class MoviestarplanetSwf:
            SchoolYard = AssetFile("school_yard.swf")

    Assets.MoviestarplanetSwf.SchoolYard
    # -> "https://example/moviestarplanet-swf/school_yard.swf"

Nested classes marked with ``@asset_group`` add a path segment; unmarked
nested classes only organize declarations. The attribute name of each
``AssetFile`` is its identifier and must be unique in the whole catalog.
"""

from collections.abc import Callable
from typing import TypeVar

from asset_paths.asset_resolver import AssetResolver
from asset_paths.segment_name import segment_name
from asset_paths.tree_builder import DeclarationTreeBuilder

T = TypeVar("T", bound=type)

GROUP_MARKER = "__asset_group__"


def asset_group(cls: T) -> T:
    """Mark a nested class as contributing a path segment."""
    setattr(cls, GROUP_MARKER, True)
    return cls


class AssetFile:
    """Declares an entry; reads as its resolved URL once bound to a catalog."""

    def __init__(self, filename: str | None = None) -> None:
        """Store the filename (None for namespace-only entries)."""
        self.filename = filename
        self.name = ""
        self._resolver: AssetResolver | None = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: object, owner: type | None = None) -> str:
        if self._resolver is None:
            msg = (
                f"Asset {self.name} is not bound to a catalog; "
                "decorate the outer class with @asset_catalog"
            )
            raise RuntimeError(msg)
        return self._resolver.resolve(self.name)

    def bind(self, resolver: AssetResolver) -> None:
        """Attach the resolver that answers attribute reads."""
        self._resolver = resolver


def asset_catalog(
    base_url: str,
    *,
    segment_namer: Callable[[str], str] = segment_name,
) -> Callable[[T], T]:
    """Build a tree from the decorated class and bind its ``AssetFile``s.

    The resolver is exposed as ``<class>.resolver``.
    """

    def decorator(root: T) -> T:
        builder = DeclarationTreeBuilder()
        files: list[AssetFile] = []
        _collect(root, None, builder, files)
        resolver = AssetResolver(
            builder.build(), base_url, segment_namer=segment_namer
        )
        for asset_file in files:
            asset_file.bind(resolver)
        root.resolver = resolver  # type: ignore[attr-defined]
        return root

    return decorator


def _collect(
    cls: type,
    parent: str | None,
    builder: DeclarationTreeBuilder,
    files: list[AssetFile],
) -> None:
    for name, value in vars(cls).items():
        if isinstance(value, AssetFile):
            builder.entry(name, value.filename, group=parent)
            files.append(value)
        elif _is_nested_class(cls, name, value):
            key = builder.group(
                name,
                parent=parent,
                participates_in_path=bool(vars(value).get(GROUP_MARKER, False)),
            )
            _collect(value, key, builder, files)


def _is_nested_class(owner: type, name: str, value: object) -> bool:
    # Skip aliases of classes defined elsewhere.
    return (
        isinstance(value, type)
        and value.__qualname__ == f"{owner.__qualname__}.{name}"
    )
