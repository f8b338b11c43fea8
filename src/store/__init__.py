"""Version database layer.

This module aggregates declarations across releases into lookup tables.
It powers exact lookups and leaf-name searches for the CLI and SDK.
"""
