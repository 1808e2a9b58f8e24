"""lilacstat CLI — Typer-based command-line interface.

Provides the ``lilacstat`` command with subcommands for a full run, the
individual render and index stages, inspecting the published index and
managing the render checkpoint.

All output uses Rich for formatted terminal display.
"""
