"""
Application layer for the lokalise bounded context.

One use case per proxied operation. Use cases depend on ports only.
"""
