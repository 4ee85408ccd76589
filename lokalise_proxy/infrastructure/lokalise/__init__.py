"""
Infrastructure adapters for the lokalise bounded context.

Each adapter implements a domain port (ABC) and connects
to an external HTTP service through httpx.
"""
