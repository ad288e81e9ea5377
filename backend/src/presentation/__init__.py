"""
Presentation Layer - HTTP surface.

FastAPI routers, request/response schemas and error translation.
"""
