"""Command line interface for gh-lol."""
