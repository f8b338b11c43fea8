"""API file ingestion.

This module retrieves per-release API files and parses their lines.
It yields typed declarations for the version database builder.
"""
