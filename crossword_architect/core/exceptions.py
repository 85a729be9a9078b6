"""Exception hierarchy for the crossword architect.

Rejected trial placements are reported as ``False`` by the validator and
never raise; the exceptions below cover caller mistakes and I/O failures.
"""


class CrosswordError(Exception):
    """Base exception for crossword architect failures."""


class PlacementError(CrosswordError):
    """Raised when a manual placement is refused."""


class PlacementBoundsError(PlacementError):
    """Raised by strict board derivation for a placement outside the grid."""


class ConfigError(CrosswordError):
    """Raised when grid configuration values are out of range."""


class ParseError(CrosswordError):
    """Raised when a generated word payload cannot be interpreted."""


class StoreError(CrosswordError):
    """Raised when persisted session state cannot be read."""
