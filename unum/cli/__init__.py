"""Command-line entry point for unum."""
