"""Domain layer — value kinds, field metadata, and errors.

This layer depends only on stdlib.
It must never import from engine, output, plugins, commands, or config.
"""
