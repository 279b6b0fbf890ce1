"""Custom exceptions for world and location generation."""


class RealmError(Exception):
    """Base exception for realmgen errors."""

    pass


class InvalidDimensionsError(RealmError, ValueError):
    """Raised when a grid is requested with non-positive dimensions."""

    pass


class InvalidPositionError(RealmError, IndexError):
    """Raised when a location grid is indexed outside its bounds."""

    pass


class NoSettlementError(RealmError):
    """Raised when entering a world tile that holds no settlement."""

    pass
