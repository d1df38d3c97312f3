"""Argument registration shared by the command modules."""
from __future__ import annotations

import argparse


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the step-by-step result as JSON instead of tagged lines",
    )


def add_repo_root_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--repo-root",
        type=str,
        metavar="PATH",
        help="Operate on this repository instead of the current directory",
    )


def add_verbose_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log every git command to stderr",
    )


def add_force_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--force",
        "-f",
        action="store_true",
        help="Skip the confirmation prompt",
    )


def add_branch_arg(parser: argparse.ArgumentParser, help_text: str = "Branch name") -> None:
    """Add the positional branch argument.

    Optional at the parser level so a missing name is reported by the
    procedure's own validation.
    """
    parser.add_argument("branch", nargs="?", help=help_text)


def add_standard_flags(parser: argparse.ArgumentParser) -> None:
    """--json, --repo-root and --verbose, accepted by every verb."""
    add_json_flag(parser)
    add_repo_root_flag(parser)
    add_verbose_flag(parser)


__all__ = [
    "add_json_flag",
    "add_repo_root_flag",
    "add_verbose_flag",
    "add_force_flag",
    "add_branch_arg",
    "add_standard_flags",
]
