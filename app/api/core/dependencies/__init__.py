"""
Core dependencies for FastAPI routes.

This package provides dependency injection functions for query validation
and other cross-cutting concerns.
"""

from app.api.core.dependencies.listing import get_listing_query

__all__ = ["get_listing_query"]
