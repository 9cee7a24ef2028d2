"""
FastAPI application exposing the address and MAC validators.

Modules in this package provide request/response schemas and the ASGI app
itself (`api.main:app`).
"""

__all__ = ["main", "schemas"]
