"""
Panequal providers.

Providers abstract the interaction with different terminal multiplexers
and environments.
"""

from .base import Provider
from .tmux import TmuxProvider
from .generic import GenericProvider

__all__ = ["Provider", "TmuxProvider", "GenericProvider"]
