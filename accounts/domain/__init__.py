"""
Domain layer package.

Contains entities, error descriptors and port interfaces.
This layer has ZERO external dependencies.
No framework imports, no IO, no side effects.
"""
