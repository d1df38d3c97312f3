"""Verb commands. Each module exposes SUMMARY, VERBS, USAGE, register_args and main."""
