"""Exception hierarchy for move generation."""


class MovegenError(Exception):
    """Base exception for move generator failures."""


class DictionaryError(MovegenError):
    """Raised when no usable word list can be loaded."""


class BoardFormatError(MovegenError):
    """Raised when board text has the wrong size or bad characters."""


class SearchError(MovegenError):
    """Raised when a search branch fails."""
