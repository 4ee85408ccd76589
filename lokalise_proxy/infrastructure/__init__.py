"""
Infrastructure layer package.

Contains adapters that implement domain ports and talk to the outside world.
"""
