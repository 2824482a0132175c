"""
Command-line interface for hook-installer.

Plays the host's part for projects that want to trigger the installation
outside a dependency manager run: it loads the project manifest, wires a
console and dispatches a lifecycle event to the plugin.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .console import ConsoleIO
from .errors import HookInstallerError
from .host import load_host_context
from .logging_utils import configure_logging
from .plugin import POST_INSTALL_CMD, HookInstallerPlugin


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hook-installer",
        description=(
            "Locate the CaptainHook executable and configuration and install "
            "the project's git hooks."
        ),
    )

    parser.add_argument(
        "event",
        nargs="?",
        default=POST_INSTALL_CMD,
        choices=sorted(HookInstallerPlugin.subscribed_events()),
        help=f"Lifecycle event to dispatch (default: {POST_INSTALL_CMD}).",
    )
    parser.add_argument(
        "-d",
        "--working-dir",
        default=".",
        help="Project directory holding composer.json (default: current directory).",
    )
    parser.add_argument(
        "--ansi",
        dest="decorated",
        action="store_true",
        help="Force decorated output.",
    )
    parser.add_argument(
        "--no-ansi",
        dest="decorated",
        action="store_false",
        help="Disable decorated output.",
    )
    parser.set_defaults(decorated=None)

    parser.add_argument(
        "--php",
        dest="interpreter",
        default=None,
        help="Interpreter used to launch the executable, e.g. the PHP binary.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (can be specified multiple times).",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    configure_logging(verbosity=args.verbose)

    decorated = args.decorated
    if decorated is None:
        decorated = sys.stdout.isatty()

    io = ConsoleIO(decorated=decorated, verbosity=args.verbose)
    plugin = HookInstallerPlugin()

    try:
        host = load_host_context(args.working_dir, interpreter=args.interpreter)
        plugin.activate(host, io)
        plugin.dispatch(args.event)
    except KeyboardInterrupt:
        return 130
    except HookInstallerError as exc:
        print(f"hook-installer: error: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":  # pragma: no cover - manual invocation
    raise SystemExit(main())
