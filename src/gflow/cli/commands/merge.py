"""
gflow merge command.

SUMMARY: Merge the updated main branch into an existing branch and push it
"""

from __future__ import annotations

import argparse

from gflow.cli import WorkflowContext, add_branch_arg, add_standard_flags, report_result
from gflow.core.workflow import merge_main

SUMMARY = "Merge the updated main branch into an existing branch and push it"
VERBS = ("-m", "--merge")
USAGE = "<branch>"
ORDER = 20


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_branch_arg(parser, "Existing local branch to update")
    add_standard_flags(parser)


def main(args: argparse.Namespace, context: WorkflowContext) -> int:
    result = merge_main(context.repo, context.settings, args.branch, reporter=context.output)
    return report_result(context.output, result)
