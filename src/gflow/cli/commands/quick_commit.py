"""
gflow quick-commit command.

SUMMARY: Stage and commit everything, optionally pushing the current branch
"""

from __future__ import annotations

import argparse

from gflow.cli import WorkflowContext, add_standard_flags, report_result
from gflow.core.workflow import quick_commit

SUMMARY = "Stage and commit everything, optionally pushing the current branch"
VERBS = ("-qc", "--quick-commit")
USAGE = "[--push|-p] [--] <message>"
ORDER = 50


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument(
        "message",
        nargs="?",
        help="Commit message; put -- before a message that starts with \"-\"",
    )
    parser.add_argument(
        "--push",
        "-p",
        action="store_true",
        help="Push the current branch after committing",
    )
    add_standard_flags(parser)


def main(args: argparse.Namespace, context: WorkflowContext) -> int:
    result = quick_commit(context.repo, args.message, push=args.push, reporter=context.output)
    return report_result(context.output, result)
