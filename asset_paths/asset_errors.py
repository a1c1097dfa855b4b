"""Exceptions raised while declaring or resolving assets."""


class AssetNotFoundError(LookupError):
    """Raised when an identifier has no declared entry."""

    def __init__(self, identifier: str) -> None:
        """Store the missing identifier."""
        super().__init__(f"Asset {identifier} not found")
        self.identifier = identifier


class DuplicateAssetError(ValueError):
    """Raised when an entry identifier or group key is declared twice."""


class CatalogError(ValueError):
    """Raised for malformed declarations."""


class ConfigError(ValueError):
    """Raised for unusable configuration files or values."""
