"""
Base provider interface for Panequal.

Defines the abstract interface to a host that can report and apply
layout strings.
"""

from abc import ABC, abstractmethod
from typing import Optional


class Provider(ABC):
    """Abstract base class for layout providers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name."""
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """Check if this provider is available in current environment."""
        pass

    @abstractmethod
    def get_layout(self, target: Optional[str] = None) -> str:
        """
        Get the current layout string.

        Args:
            target: Optional window identifier.

        Returns:
            Layout in "<checksum>,<body>" form.

        Raises:
            FetchError: If no usable layout could be obtained.
        """
        pass

    @abstractmethod
    def apply_layout(self, layout: str, target: Optional[str] = None) -> None:
        """
        Replace the current layout.

        Args:
            layout: Layout in "<checksum>,<body>" form.
            target: Optional window identifier.

        Raises:
            ApplyError: If the host rejected the layout.
        """
        pass
