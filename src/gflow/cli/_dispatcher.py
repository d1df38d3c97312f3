"""
Verb dispatcher for gflow.

Scans ``cli/commands`` for command modules and maps each module's VERBS to
it. Adding a new verb = add a .py file exposing SUMMARY, VERBS, USAGE,
register_args(parser) and main(args, context).
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional

from gflow import __version__
from gflow.cli._output import OutputFormatter
from gflow.cli._utils import build_context
from gflow.core.exceptions import GflowError

logger = logging.getLogger(__name__)

PROG = "gflow"
HELP_VERBS = ("-h", "--help")
VERSION_VERBS = ("--version",)


class UsageError(Exception):
    """Raised by a command parser instead of exiting the process."""


class _ParserExit(Exception):
    def __init__(self, status: int) -> None:
        super().__init__(status)
        self.status = status


class _CommandParser(argparse.ArgumentParser):
    """ArgumentParser that reports problems to the dispatcher instead of exiting."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(message)

    def exit(self, status: int = 0, message: Optional[str] = None) -> None:  # type: ignore[override]
        if message:
            print(message, end="")
        raise _ParserExit(status)


@lru_cache(maxsize=1)
def discover_commands() -> Dict[str, Dict[str, Any]]:
    """Import every module in cli/commands that declares VERBS.

    Returns:
        Dict mapping command name to command info dict
    """
    commands_dir = Path(__file__).parent / "commands"
    commands: Dict[str, Dict[str, Any]] = {}

    for item in sorted(commands_dir.glob("*.py")):
        if item.name.startswith("_"):
            continue
        cmd_name = item.stem
        try:
            module = importlib.import_module(f"gflow.cli.commands.{cmd_name}")
        except ImportError as e:
            print(f"Warning: Could not import command {cmd_name}: {e}", file=sys.stderr)
            continue
        verbs = tuple(getattr(module, "VERBS", ()))
        if not verbs:
            continue
        commands[cmd_name] = {
            "module": module,
            "verbs": verbs,
            "summary": getattr(module, "SUMMARY", cmd_name),
            "usage": getattr(module, "USAGE", ""),
            "order": getattr(module, "ORDER", 100),
            "register_args": getattr(module, "register_args", None),
            "main": getattr(module, "main", None),
        }
    return commands


@lru_cache(maxsize=1)
def verb_index() -> Dict[str, str]:
    """Map every verb spelling to its command name."""
    index: Dict[str, str] = {}
    for name, info in discover_commands().items():
        for verb in info["verbs"]:
            if verb in index:
                raise RuntimeError(f"Verb {verb} is claimed by both {index[verb]} and {name}")
            index[verb] = name
    return index


def format_usage() -> str:
    """Return the top-level usage text."""
    rows: List[tuple[str, str]] = []
    for _, info in sorted(discover_commands().items(), key=lambda kv: (kv[1]["order"], kv[0])):
        spelled = ", ".join(info["verbs"])
        left = f"{spelled} {info['usage']}".rstrip()
        rows.append((left, info["summary"]))
    rows.append(("-h, --help", "Show this help"))
    rows.append(("--version", "Show the version"))

    width = max(len(left) for left, _ in rows)
    lines = [
        f"Usage: {PROG} <command> [arguments] [--repo-root PATH] [--json] [--verbose]",
        "",
        "Git workflow automation.",
        "",
        "Commands:",
    ]
    lines += [f"  {left.ljust(width)}  {summary}" for left, summary in rows]
    lines += [
        "",
        "Examples:",
        f"  {PROG} -n feature/login",
        f"  {PROG} -ms feature/login",
        f'  {PROG} -qc "fix typo" --push',
        f"  {PROG} -qc -- -wip",
    ]
    return "\n".join(lines)


def _wants_json(rest: list[str]) -> bool:
    """True when --json appears among the options, i.e. before any ``--``."""
    options = rest[: rest.index("--")] if "--" in rest else rest
    return "--json" in options


def build_command_parser(name: str) -> argparse.ArgumentParser:
    info = discover_commands()[name]
    parser = _CommandParser(
        prog=f"{PROG} {info['verbs'][-1]}",
        description=info["summary"],
        allow_abbrev=False,
    )
    if info["register_args"]:
        info["register_args"](parser)
    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the gflow CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success or help, 1 for errors, 130 when interrupted)
    """
    if argv is None:
        argv = sys.argv[1:]
    argv = list(argv)

    if not argv or argv[0] in HELP_VERBS:
        print(format_usage())
        return 0
    if argv[0] in VERSION_VERBS:
        print(f"{PROG} {__version__}")
        return 0

    verb, rest = argv[0], argv[1:]
    name = verb_index().get(verb)
    if name is None:
        OutputFormatter().error(f"Unknown command: {verb}")
        print(format_usage())
        return 1

    parser = build_command_parser(name)
    try:
        args = parser.parse_args(rest)
    except UsageError as e:
        if _wants_json(rest):
            OutputFormatter(json_mode=True).failure(e)
            return 1
        OutputFormatter().error(str(e))
        print(parser.format_usage(), end="")
        return 1
    except _ParserExit as e:
        return e.status

    output = OutputFormatter(json_mode=bool(getattr(args, "json", False)))
    func = discover_commands()[name]["main"]
    try:
        context = build_context(args, output)
        return int(func(args, context))
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 130
    except GflowError as e:
        logger.debug("%s failed: %s", name, e)
        output.failure(e)
        return 1
    except Exception as e:
        logger.exception("%s crashed", name)
        output.failure(e)
        return 1


__all__ = [
    "discover_commands",
    "verb_index",
    "format_usage",
    "build_command_parser",
    "main",
]
