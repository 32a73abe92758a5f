"""Domain layer: statement model, lifecycle states and errors.

This layer imports nothing from the rest of the package.
"""
