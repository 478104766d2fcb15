"""Command-line interface for versionstring."""
