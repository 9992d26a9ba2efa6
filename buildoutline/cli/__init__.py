"""buildoutline CLI — Typer-based command-line interface.

Replays recorded build event logs through the tree builder and prints
the folded text view or search results.  All output uses Rich.
"""
