"""
Generic provider for Panequal.

A provider that works with a layout string held in memory.
Useful for library usage and custom integrations.
"""

from typing import Optional, Callable

from .base import Provider
from ..errors import FetchError


class GenericProvider(Provider):
    """
    Generic provider for custom integrations.

    This provider doesn't talk to any terminal multiplexer. The layout is
    supplied programmatically and applied layouts are stored back.
    """

    @property
    def name(self) -> str:
        return "generic"

    def __init__(
        self,
        layout: str = "",
        on_layout_applied: Optional[Callable[[str], None]] = None
    ):
        """
        Initialize generic provider.

        Args:
            layout: Initial layout string ("<checksum>,<body>").
            on_layout_applied: Callback when a layout is applied.
        """
        self._layout = layout
        self._on_layout_applied = on_layout_applied
        self.applied: list[str] = []

    def is_available(self) -> bool:
        """Always available."""
        return True

    def set_layout(self, layout: str) -> None:
        """Set the current layout string."""
        self._layout = layout

    def get_layout(self, target: Optional[str] = None) -> str:
        """Get stored layout."""
        if not self._layout.strip():
            raise FetchError("no layout set")
        return self._layout

    def apply_layout(self, layout: str, target: Optional[str] = None) -> None:
        """Store the layout and call the callback."""
        self._layout = layout
        self.applied.append(layout)

        if self._on_layout_applied:
            self._on_layout_applied(layout)
