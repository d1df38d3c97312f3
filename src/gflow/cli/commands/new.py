"""
gflow new command.

SUMMARY: Create or switch to a branch starting from an up-to-date main branch
"""

from __future__ import annotations

import argparse

from gflow.cli import WorkflowContext, add_branch_arg, add_standard_flags, report_result
from gflow.core.workflow import new_branch

SUMMARY = "Create or switch to a branch starting from an up-to-date main branch"
VERBS = ("-n", "--new")
USAGE = "<branch>"
ORDER = 10


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_branch_arg(parser, "Branch to create or switch to (must not be protected)")
    add_standard_flags(parser)


def main(args: argparse.Namespace, context: WorkflowContext) -> int:
    result = new_branch(context.repo, context.settings, args.branch, reporter=context.output)
    return report_result(context.output, result)
