"""Built-in catalog of shared project assets.

Usage::

    from asset_paths.default_catalog import Assets

    Assets.Moviestarplanet.Diamond
    # -> ".../moviestarplanet/diamond.png"
"""

from asset_paths.declare import AssetFile, asset_catalog, asset_group
from asset_paths.load_config import DEFAULT_BASE_URL


@asset_catalog(DEFAULT_BASE_URL)
class Assets:
    """All assets used across our projects."""

    @asset_group
    class Moviestarplanet:
        Diamond = AssetFile("diamond.png")

    @asset_group
    class MoviestarplanetSwf:
        SchoolYard = AssetFile("school_yard.swf")
        TheLobby = AssetFile("the_lobby.swf")
        VideoTop = AssetFile("video_top.swf")

    @asset_group
    class MoviestarplanetComponents:
        @asset_group
        class Login:
            CityBackground = AssetFile("citybackground.svg")
            CreateUserLight = AssetFile("createuserlight.svg")

        @asset_group
        class Preloader:
            Background = AssetFile("background.png")
