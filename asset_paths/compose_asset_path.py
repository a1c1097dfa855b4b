"""Utility for assembling the final asset URL."""

from collections.abc import Sequence


def compose_asset_path(
    base_url: str,
    segments: Sequence[str],
    filename: str | None,
) -> str:
    """Join ``base_url``, root-to-leaf segments and the filename.

    No separator is inserted after ``base_url``; it is expected to end with
    one. Missing segments or filename leave their slot empty, which yields
    ``base//file`` or ``base/seg/`` shapes.
    """
    path = "/".join(segments)
    return f"{base_url}{path}/{filename or ''}"
