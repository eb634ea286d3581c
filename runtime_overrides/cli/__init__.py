"""runtime-overrides CLI: Typer-based command-line interface.

All human-facing output uses Rich; the generated paths are also echoed
as plain lines for scripts.
"""
