"""Tests for path segment naming."""

from asset_paths.segment_name import segment_name


def test_compound_name_is_hyphenated() -> None:
    """Verify lower-to-upper boundaries become hyphens."""
    assert segment_name("FooBar") == "foo-bar"
    assert segment_name("MoviestarplanetSwf") == "moviestarplanet-swf"
    assert segment_name("MoviestarplanetComponents") == "moviestarplanet-components"


def test_single_word_is_lowercased() -> None:
    """Verify names without boundaries are only lowercased."""
    assert segment_name("Login") == "login"
    assert segment_name("preloader") == "preloader"


def test_consecutive_capitals_stay_together() -> None:
    """Verify the rule only splits a lowercase letter followed by a capital."""
    assert segment_name("HTTPServer") == "httpserver"
    assert segment_name("MyUIKit") == "my-uikit"


def test_digits_are_not_boundaries() -> None:
    """Verify digits never trigger a split."""
    assert segment_name("Level2Map") == "level2map"
