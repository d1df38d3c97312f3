"""Core gflow library: configuration, git collaborator and workflow procedures."""
