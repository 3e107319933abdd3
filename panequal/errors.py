"""
Panequal exceptions.

Every failure in the equalize pipeline is terminal for the invocation and
surfaces as a subclass of PanequalError.
"""

from typing import Optional


class PanequalError(Exception):
    """Base class for all panequal errors."""


class FetchError(PanequalError):
    """The host returned an empty or unusable layout."""


class ParseError(PanequalError):
    """Malformed layout encoding."""

    def __init__(self, pos: int, expected: str, actual: Optional[str]):
        """
        Args:
            pos: 0-based offset of the offending character.
            expected: Character (or description) that was required.
            actual: Character found, or None at end of input.
        """
        self.pos = pos
        self.expected = expected
        self.actual = actual
        got = actual if actual is not None else ""
        super().__init__(f"Parse error at position {pos}: expected '{expected}', got '{got}'")


class ApplyError(PanequalError):
    """The host rejected a layout string."""

    def __init__(self, message: str, layout: str = ""):
        self.layout = layout
        super().__init__(message)
