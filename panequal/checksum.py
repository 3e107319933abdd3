"""
tmux layout checksum.

tmux refuses a layout string unless it is prefixed with this 16-bit
rotate-right-then-add checksum of the body.
"""

from .parser import split_layout


def layout_checksum(body: str) -> int:
    """Calculate the tmux layout checksum of a body."""
    csum = 0
    for b in body.encode("utf-8"):
        csum = (csum >> 1) | ((csum & 1) << 15)
        csum = (csum + b) & 0xffff
    return csum


def format_checksum(value: int) -> str:
    """Format a checksum as 4 lowercase hex digits."""
    return f"{value:04x}"


def encode_layout(body: str) -> str:
    """Prefix a layout body with its checksum."""
    return f"{format_checksum(layout_checksum(body))},{body}"


def verify_layout(raw: str) -> bool:
    """Check that a full layout string carries the right checksum."""
    checksum, body = split_layout(raw)
    return checksum.lower() == format_checksum(layout_checksum(body))
