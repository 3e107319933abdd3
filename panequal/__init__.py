"""
Panequal - Equalize tmux pane sizes while preserving layout structure.

Parses a tmux layout string, gives every group of sibling panes equal
size at each split level, and re-encodes it with tmux's checksum.

Basic Usage:
    from panequal import rebalance

    # raw = "<checksum>,80x24,0,0{50x24,0,0,5,29x24,51,0,6}"
    result = rebalance(raw)
    result.after    # "80x24,0,0{39x24,0,0,5,40x24,40,0,6}"
    result.encoded  # "<new checksum>,80x24,0,0{39x24,0,0,5,40x24,40,0,6}"

With Provider (e.g., tmux):
    from panequal import equalize_window
    from panequal.providers import TmuxProvider

    equalize_window(TmuxProvider())
"""

__version__ = "0.1.0"
__author__ = "Panequal Contributors"

# Core types
from .types import (
    NodeKind,
    LayoutNode,
    EqualizeResult,
)

# Errors
from .errors import (
    PanequalError,
    FetchError,
    ParseError,
    ApplyError,
)

# Core functions
from .parser import parse_layout, split_layout
from .layout import LayoutEqualizer, equalize, split_sizes
from .serializer import serialize_layout
from .checksum import layout_checksum, format_checksum, encode_layout, verify_layout
from .pipeline import rebalance, equalize_window

# Configuration
from .config import (
    PanequalConfig,
    TmuxConfig,
    OutputConfig,
    load_config,
    save_config,
    get_config_path,
)

from . import providers

__all__ = [
    # Version
    "__version__",

    # Types
    "NodeKind",
    "LayoutNode",
    "EqualizeResult",

    # Errors
    "PanequalError",
    "FetchError",
    "ParseError",
    "ApplyError",

    # Core
    "parse_layout",
    "split_layout",
    "LayoutEqualizer",
    "equalize",
    "split_sizes",
    "serialize_layout",
    "layout_checksum",
    "format_checksum",
    "encode_layout",
    "verify_layout",
    "rebalance",
    "equalize_window",

    # Configuration
    "PanequalConfig",
    "TmuxConfig",
    "OutputConfig",
    "load_config",
    "save_config",
    "get_config_path",

    # Submodules
    "providers",
]
