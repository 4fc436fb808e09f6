"""claude-config CLI entry point.

This package provides a Click-based CLI that materializes Claude Code
settings, slash commands, skills and wrapper scripts into the home
directory. See `claude-config --help` for details.
"""
