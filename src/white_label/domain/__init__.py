"""Domain layer: clause model, parser, resolver, and code generation.

This layer depends only on the standard library.
It must never import from services, commands, output, or config.
"""
