"""
gflow merge-stash command.

SUMMARY: Like --merge, but stash local changes first and restore them afterwards
"""

from __future__ import annotations

import argparse

from gflow.cli import WorkflowContext, add_branch_arg, add_standard_flags, report_result
from gflow.core.workflow import merge_main_with_stash

SUMMARY = "Like --merge, but stash local changes first and restore them afterwards"
VERBS = ("-ms", "--merge-stash")
USAGE = "<branch>"
ORDER = 30


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_branch_arg(parser, "Existing local branch to update")
    add_standard_flags(parser)


def main(args: argparse.Namespace, context: WorkflowContext) -> int:
    result = merge_main_with_stash(context.repo, context.settings, args.branch, reporter=context.output)
    return report_result(context.output, result)
