"""Command-line interface for proj2tree."""
