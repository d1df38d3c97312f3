"""Test helpers: a recording fake repository and real-git setup utilities."""
