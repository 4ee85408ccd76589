"""
Interfaces layer package.

Contains FastAPI routers, Pydantic request schemas and dependency wiring.
No business logic belongs here. Routes call use cases and return responses.
"""
