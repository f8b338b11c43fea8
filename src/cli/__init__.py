"""Command line interface for gosince."""
