"""
gflow CLI package.

A single entry point dispatches a verb (``-n``, ``-m``, ``-ms``, ``-c``,
``-qc``) to one command module under ``cli/commands``.

Framework utilities for building CLI commands:
- _output: Tagged text / JSON output
- _args: Common argument registration helpers
- _utils: Repository precondition, context building and result reporting
"""
from ._output import OutputFormatter
from ._args import (
    add_json_flag,
    add_repo_root_flag,
    add_verbose_flag,
    add_force_flag,
    add_branch_arg,
    add_standard_flags,
)
from ._utils import (
    WorkflowContext,
    build_context,
    confirm,
    report_result,
    require_repository,
)

__all__ = [
    # Output formatting
    "OutputFormatter",
    # Argument helpers
    "add_json_flag",
    "add_repo_root_flag",
    "add_verbose_flag",
    "add_force_flag",
    "add_branch_arg",
    "add_standard_flags",
    # Utilities
    "WorkflowContext",
    "build_context",
    "confirm",
    "report_result",
    "require_repository",
]
