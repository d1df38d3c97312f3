"""
gflow clean command.

SUMMARY: Discard all uncommitted changes and untracked files (asks first)
"""

from __future__ import annotations

import argparse

from gflow.cli import WorkflowContext, add_force_flag, add_standard_flags, confirm, report_result
from gflow.core.workflow import clean

SUMMARY = "Discard all uncommitted changes and untracked files (asks first)"
VERBS = ("-c", "--clean")
USAGE = ""
ORDER = 40

PROMPT = "This will discard ALL uncommitted changes and untracked files. Continue? [y/N] "


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_force_flag(parser)
    add_standard_flags(parser)


def main(args: argparse.Namespace, context: WorkflowContext) -> int:
    output = context.output
    output.warning("Cleaning resets the working tree to the last commit; this cannot be undone")
    result = clean(
        context.repo,
        confirm=lambda: confirm(PROMPT, json_mode=output.json_mode),
        force=args.force,
        reporter=output,
    )
    return report_result(output, result)
