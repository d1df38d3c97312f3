"""
gflow - git branching and merging workflows

gflow wraps the everyday branch sequences (start a feature branch from a
fresh main, merge main back into a branch, quick commits, hard clean) into
single commands with stash handling and explicit step reporting.
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
