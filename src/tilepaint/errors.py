# src/tilepaint/errors.py
# Exception kinds raised by the generation engine and its drivers.


class TilepaintError(Exception):
    """Base class for every error raised by tilepaint."""


class InvalidDimension(TilepaintError, ValueError):
    """Width or height is not a positive integer."""


class OutOfBounds(TilepaintError, IndexError):
    """A coordinate outside the grid was used (engine bug, not a user error)."""


class InvalidOption(TilepaintError, ValueError):
    """A generation option, mode or hand-authored pattern is malformed."""


class DegenerateLayout(TilepaintError):
    """No ground cell is available for the ball; the layout cannot be played."""
