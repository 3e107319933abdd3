"""
Panequal equalize pipeline.

fetch -> parse -> equalize -> serialize -> checksum -> apply.
Any error aborts the remaining stages.
"""

import logging
from typing import Optional

from .checksum import format_checksum, layout_checksum
from .errors import FetchError
from .layout import LayoutEqualizer
from .parser import parse_layout, split_layout
from .providers.base import Provider
from .serializer import serialize_layout
from .types import EqualizeResult, Geometry, LayoutNode

logger = logging.getLogger(__name__)


def _pane_geometry(root: LayoutNode) -> dict[int, Geometry]:
    return {leaf.pane_id: leaf.geometry for leaf in root.leaves() if leaf.pane_id is not None}


def rebalance(raw: str) -> EqualizeResult:
    """
    Equalize a full layout string.

    Args:
        raw: Layout as reported by the host ("<checksum>,<body>").

    Returns:
        EqualizeResult with the new body and checksum.

    Raises:
        FetchError: If raw is empty.
        ParseError: If the body is malformed.
    """
    if not raw or not raw.strip():
        raise FetchError("empty layout string")

    _, before = split_layout(raw)
    root = parse_layout(before)
    panes_before = _pane_geometry(root)

    # The window size is taken as given
    LayoutEqualizer().equalize(root)

    after = serialize_layout(root)
    checksum = format_checksum(layout_checksum(after))
    logger.debug("Equalized layout %s -> %s", before, after)

    return EqualizeResult(
        before=before,
        after=after,
        checksum=checksum,
        root=root,
        panes_before=panes_before,
        panes_after=_pane_geometry(root),
    )


def equalize_window(
    provider: Provider,
    target: Optional[str] = None,
    dry_run: bool = False
) -> EqualizeResult:
    """
    Equalize the panes of one window through a provider.

    Args:
        provider: Host provider.
        target: Optional window identifier.
        dry_run: If True, calculate but don't apply.

    Returns:
        EqualizeResult describing the change.
    """
    raw = provider.get_layout(target)
    result = rebalance(raw)

    if not dry_run:
        provider.apply_layout(result.encoded, target)
        logger.info("Applied layout %s via %s", result.encoded, provider.name)

    return result
