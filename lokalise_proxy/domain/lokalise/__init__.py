"""
Lokalise bounded context: domain layer.

- Error taxonomy and upstream status mapping
- Preview archive extraction
- Comment aggregation by translation key
"""
