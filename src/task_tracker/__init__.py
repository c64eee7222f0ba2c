"""task-cli: a single-user command-line task tracker backed by a flat file."""

__version__ = "0.1.0"
