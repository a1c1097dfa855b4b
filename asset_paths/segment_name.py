"""Utility for turning a group name into a path segment."""

import re

# Only a lowercase letter directly followed by an uppercase one is a boundary;
# runs of capitals stay together (HTTPServer -> httpserver).
SEGMENT_BOUNDARY_RE = re.compile(r"([a-z])([A-Z])")


def segment_name(name: str) -> str:
    """Hyphenate lower-to-upper boundaries and lowercase: FooBar -> foo-bar."""
    return SEGMENT_BOUNDARY_RE.sub(r"\1-\2", name).lower()
