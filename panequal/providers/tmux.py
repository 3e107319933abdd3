"""
tmux provider for Panequal.

Reads and applies window layouts through the tmux command line.
"""

import logging
import subprocess
from typing import Optional

from .base import Provider
from ..errors import ApplyError, FetchError

logger = logging.getLogger(__name__)


class TmuxProvider(Provider):
    """Provider for tmux terminal multiplexer."""

    @property
    def name(self) -> str:
        return "tmux"

    def __init__(self, socket_path: Optional[str] = None, timeout: float = 5.0):
        """
        Initialize tmux provider.

        Args:
            socket_path: Optional tmux socket path. If None, uses default socket.
            timeout: Seconds to wait for each tmux command.
        """
        self.socket_path = socket_path
        self.timeout = timeout

    def _run_tmux(self, *args: str) -> subprocess.CompletedProcess:
        """Run tmux command and return the completed process."""
        cmd = ["tmux"]
        if self.socket_path:
            cmd.extend(["-S", self.socket_path])
        cmd.extend(args)

        logger.debug("Running %s", cmd)
        return subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=self.timeout
        )

    def is_available(self) -> bool:
        """Check if tmux is available and we're in a session."""
        try:
            result = self._run_tmux("display-message", "-p", "#{session_name}")
            return result.returncode == 0 and bool(result.stdout.strip())
        except (subprocess.TimeoutExpired, OSError):
            return False

    def get_layout(self, target: Optional[str] = None) -> str:
        """Get the window layout via display-message."""
        args = ["display-message", "-p"]
        if target:
            args.extend(["-t", target])
        args.append("#{window_layout}")

        try:
            result = self._run_tmux(*args)
        except FileNotFoundError as e:
            raise FetchError("tmux executable not found") from e
        except OSError as e:
            raise FetchError(f"could not run tmux: {e}") from e
        except subprocess.TimeoutExpired as e:
            raise FetchError(f"tmux timed out after {self.timeout}s") from e

        if result.returncode != 0:
            message = result.stderr.strip() or f"exit status {result.returncode}"
            logger.warning("tmux display-message failed: %s", message)
            raise FetchError(f"could not get tmux layout: {message}")

        layout = result.stdout.strip()
        if not layout:
            raise FetchError("could not get tmux layout. Are you inside a tmux session?")
        return layout

    def apply_layout(self, layout: str, target: Optional[str] = None) -> None:
        """Apply a layout string atomically via select-layout."""
        args = ["select-layout"]
        if target:
            args.extend(["-t", target])
        args.append(layout)

        try:
            result = self._run_tmux(*args)
        except FileNotFoundError as e:
            raise ApplyError("tmux executable not found", layout) from e
        except OSError as e:
            raise ApplyError(f"could not run tmux: {e}", layout) from e
        except subprocess.TimeoutExpired as e:
            raise ApplyError(f"tmux timed out after {self.timeout}s", layout) from e

        if result.returncode != 0:
            message = result.stderr.strip() or f"exit status {result.returncode}"
            logger.warning("tmux select-layout failed: %s", message)
            raise ApplyError(f"tmux rejected layout: {message}", layout)
