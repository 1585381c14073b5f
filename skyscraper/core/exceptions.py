"""Custom exception hierarchy for the skyscraper solver."""


class SkyscraperError(Exception):
    """Base exception for solver failures."""


class MalformedPuzzle(SkyscraperError):
    """Raised when a puzzle's dimension, clues or grid are out of range."""


class PuzzleFormatError(MalformedPuzzle):
    """Raised when puzzle text cannot be read as the expected integers."""


class CursorMisuse(SkyscraperError):
    """Raised when a placement is requested at a complete cursor."""


class SearchLimitExceeded(SkyscraperError):
    """Raised when the search driver explores more nodes than allowed."""


class ValidationError(SkyscraperError):
    """Raised when a grid breaks a uniqueness or visibility rule."""


class SolverTimeout(SkyscraperError):
    """Raised when CP-SAT stops at its time limit without deciding the puzzle."""
