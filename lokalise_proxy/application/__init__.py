"""
Application layer package.

Use cases coordinate domain logic and ports. No framework imports.
"""
