"""
Shared module package.

Contains cross-cutting concerns:
- Error handling and mapping
- CORS edge middleware
- Logging configuration
"""
