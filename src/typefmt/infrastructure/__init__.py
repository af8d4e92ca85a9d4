"""Infrastructure layer — import-path resolution and argument parsing.

This layer depends on stdlib only.
It must never import from services, commands, or output.
"""
