"""
Lokalise Preview Proxy: edge service for the Lokalise browser extension.

Application package root. A small modular service using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - lokalise: Language lookup, file previews, DOCX-to-PDF conversion,
      project comment aggregation.

Layers:
    - domain: Pure logic, entities, ports (ABCs), errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: httpx adapters implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, CORS, logging).
"""
