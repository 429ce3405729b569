"""Command-line interface for dir2tree."""
