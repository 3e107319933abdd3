#!/usr/bin/env python3
"""
Panequal CLI - Equalize tmux pane sizes.

Usage:
    panequal [equalize] [--target=<t>] [--dry-run] [--json] [--quiet]
    panequal layout <layout> [--json]
    panequal check <layout>
    panequal config [show|init|path]
    panequal --version
    panequal --help
"""

import argparse
import json
import logging
import sys

from panequal import (
    EqualizeResult,
    PanequalConfig,
    PanequalError,
    __version__,
    equalize_window,
    get_config_path,
    load_config,
    rebalance,
    save_config,
    verify_layout,
)
from panequal.providers import TmuxProvider

logger = logging.getLogger("panequal")


def _format_geometry(geometry) -> str:
    width, height, x, y = geometry
    return f"{width}x{height}@({x},{y})"


def result_to_dict(result: EqualizeResult, status: str) -> dict:
    """Build the JSON-serializable report for an equalize run."""
    panes = []
    for pane_id, after in result.panes_after.items():
        before = result.panes_before.get(pane_id, after)
        panes.append({
            "id": f"%{pane_id}",
            "before": _format_geometry(before),
            "after": _format_geometry(after),
        })

    return {
        "status": status,
        "changed": result.changed,
        "before": result.before,
        "after": result.after,
        "layout": result.encoded,
        "panes": panes,
    }


def format_result(report: dict) -> str:
    """Format a report as a single line, suitable for tmux display-message."""
    if not report["changed"]:
        return "Panes already equal"

    prefix = "[dry-run] " if report["status"] == "dry_run" else ""
    parts = [
        f"{p['id']}: {p['before']} -> {p['after']}"
        for p in report["panes"]
        if p["before"] != p["after"]
    ]
    return f"{prefix}{' | '.join(parts)}"


def _report_error(e: Exception, use_json: bool) -> int:
    if use_json:
        print(json.dumps({"status": "error", "error": type(e).__name__, "message": str(e)}))
    else:
        print(f"Error: {e}", file=sys.stderr)
    return 1


def cmd_equalize(args, config: PanequalConfig):
    """Equalize the panes of a tmux window."""
    use_json = args.json or config.output.json
    provider = TmuxProvider(
        socket_path=config.tmux.socket_path or None,
        timeout=config.tmux.timeout,
    )
    target = args.target or config.tmux.target or None

    try:
        result = equalize_window(provider, target=target, dry_run=args.dry_run)
    except PanequalError as e:
        return _report_error(e, use_json)

    report = result_to_dict(result, "dry_run" if args.dry_run else "applied")
    if use_json:
        print(json.dumps(report, indent=2))
    elif not args.quiet:
        print(format_result(report))
    return 0


def cmd_layout(args, config: PanequalConfig):
    """Equalize a layout string without touching tmux."""
    use_json = args.json or config.output.json

    try:
        result = rebalance(args.layout)
    except PanequalError as e:
        return _report_error(e, use_json)

    if use_json:
        print(json.dumps(result_to_dict(result, "calculated"), indent=2))
    else:
        print(result.encoded)
    return 0


def cmd_check(args, config: PanequalConfig):
    """Verify the checksum of a layout string."""
    if verify_layout(args.layout):
        print("Checksum OK")
        return 0
    print("Checksum mismatch", file=sys.stderr)
    return 1


def cmd_config(args, config: PanequalConfig):
    """Configuration management."""
    config_path = get_config_path()

    if args.config_action == "path":
        print(config_path)

    elif args.config_action == "show":
        print(json.dumps(config.to_dict(), indent=2))

    elif args.config_action == "init":
        if config_path.exists() and not args.force:
            print(f"Config already exists: {config_path}")
            print("Use --force to overwrite")
        elif save_config(PanequalConfig(), config_path):
            print(f"Created: {config_path}")
        else:
            print(f"Error: could not write {config_path}", file=sys.stderr)
            return 1

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="panequal",
        description="Equalize tmux pane sizes while preserving layout structure"
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    subparsers = parser.add_subparsers(dest="command")

    # equalize
    p_equalize = subparsers.add_parser("equalize", help="Equalize panes of a tmux window (default)")
    p_equalize.add_argument("-t", "--target", help="Target window (overrides config)")
    p_equalize.add_argument("-n", "--dry-run", action="store_true", help="Don't apply changes")
    p_equalize.add_argument("-j", "--json", action="store_true", help="JSON output")
    p_equalize.add_argument("-q", "--quiet", action="store_true", help="Suppress output")

    # layout
    p_layout = subparsers.add_parser("layout", help="Equalize a layout string offline")
    p_layout.add_argument("layout", help="Layout string, e.g. from '#{window_layout}'")
    p_layout.add_argument("-j", "--json", action="store_true", help="JSON output")

    # check
    p_check = subparsers.add_parser("check", help="Verify a layout string's checksum")
    p_check.add_argument("layout", help="Layout string")

    # config
    p_config = subparsers.add_parser("config", help="Configuration management")
    p_config.add_argument("config_action", nargs="?", default="show",
                          choices=["show", "init", "path"])
    p_config.add_argument("--force", action="store_true", help="Force overwrite")

    return parser


_COMMANDS = {"equalize", "layout", "check", "config"}
_GLOBAL_FLAGS = {"-v", "--verbose"}
_EXIT_FLAGS = {"-h", "--help", "-V", "--version"}


def _default_command(argv: list[str]) -> list[str]:
    """Insert "equalize" when no command is given, so its flags work bare."""
    if _COMMANDS.intersection(argv) or _EXIT_FLAGS.intersection(argv):
        return argv
    global_args = [a for a in argv if a in _GLOBAL_FLAGS]
    rest = [a for a in argv if a not in _GLOBAL_FLAGS]
    return [*global_args, "equalize", *rest]


def main(argv=None):
    """CLI entry point."""
    # Load config first
    config = load_config()

    parser = build_parser()
    argv = sys.argv[1:] if argv is None else list(argv)
    args = parser.parse_args(_default_command(argv))

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.output.log_level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logger.debug("Config: %s", config.to_dict())

    if args.command == "equalize":
        return cmd_equalize(args, config)
    elif args.command == "layout":
        return cmd_layout(args, config)
    elif args.command == "check":
        return cmd_check(args, config)
    elif args.command == "config":
        return cmd_config(args, config)
    else:
        parser.print_help()
        return 0


if __name__ == "__main__":
    sys.exit(main())
