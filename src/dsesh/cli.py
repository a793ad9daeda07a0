#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Command line interface.

  dsesh                  show help
  dsesh -v <command>     same, with debug logging
  dsesh list [filter]    list session names (case-insensitive substring filter)
  dsesh connect <name>   run the session's startup command
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

from dsesh import __version__
from dsesh.config import Session, load_all_sessions
from dsesh.errors import ConfigError, SeshError, SessionNotFoundError
from dsesh.launcher import connect_session
from dsesh.paths import config_path
from dsesh.sessions import find_session, list_sessions


PROG = "dsesh"
COMMANDS = ("connect", "list")
VERBOSE_FLAGS = ("-v", "--verbose")


def _use_color() -> bool:
    return not os.environ.get("NO_COLOR") and sys.stdout.isatty()


def help_text(color: bool = False) -> str:
    if color:
        bold, green, yellow, reset = "\033[1m", "\033[32m", "\033[33m", "\033[0m"
    else:
        bold = green = yellow = reset = ""
    return (
        f"\n{bold}{PROG} v{__version__}{reset}  06/02/2026  SBDJ\n"
        f"\n{PROG} is a terminal session manager designed to be compatible with Sesh TOML configurations.\n"
        f"\nUSAGE:\n  {green}{PROG} [-v] [command]{reset}\n"
        f"\nCOMMANDS:\n"
        f"  {yellow}connect{reset}    Connect to the given session\n"
        f"  {yellow}list{reset}       List sessions\n"
    )


def _load_sessions() -> List[Session]:
    path = config_path()
    if path is None:
        raise ConfigError("Could not locate sesh config: home directory is unknown")
    return load_all_sessions(path)


# ---------------------------
# CLI handlers
# ---------------------------

def cmd_list(args: argparse.Namespace) -> int:
    """! @brief CLI handler: list.

    @param args Parsed argparse args.
    @return Process exit code.
    """
    for name in list_sessions(_load_sessions(), args.filter):
        print(name)
    return 0


def cmd_connect(args: argparse.Namespace) -> int:
    """! @brief CLI handler: connect.

    An empty name is accepted and does nothing.

    @param args Parsed argparse args.
    @return Process exit code.
    """
    name = args.name
    if name is None:
        raise SeshError("connect requires a session name")
    if name == "":
        return 0

    session = find_session(_load_sessions(), name)
    if session is None:
        raise SessionNotFoundError(name)
    connect_session(session)
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog=PROG,
        formatter_class=argparse.RawTextHelpFormatter,
        description="Launch terminal sessions from a Sesh TOML config.",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Log config loading and launch details.")
    sub = p.add_subparsers(dest="cmd")

    pc = sub.add_parser("connect", help="Connect to the given session.")
    pc.add_argument("name", nargs="?", help="Session name (surrounding whitespace is ignored).")
    pc.set_defaults(func=cmd_connect)

    pl = sub.add_parser("list", help="List sessions.")
    pl.add_argument("filter", nargs="?", help="Case-insensitive substring to match names against.")
    pl.set_defaults(func=cmd_list)

    return p


def main(argv: Optional[List[str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(level=logging.WARNING, format="[%(levelname)s] %(message)s")

    flags = []
    while argv and argv[0] in VERBOSE_FLAGS:
        flags.append(argv.pop(0))

    if not argv or argv[0] in ("-h", "--help"):
        print(help_text(color=_use_color()))
        return 0
    if argv[0] not in COMMANDS:
        print(f"error: Unknown command: `{argv[0]}`", file=sys.stderr)
        return 2

    # Everything after the command is a raw name or filter, even if it starts with "-".
    args = build_parser().parse_args([*flags, argv[0], "--", *argv[1:]])
    logging.getLogger("dsesh").setLevel(logging.DEBUG if args.verbose else logging.WARNING)
    try:
        return int(args.func(args))
    except SeshError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
