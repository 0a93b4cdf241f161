"""API routes package"""

from bookpoint_api.api.routes import health

__all__ = [
    "health",
]
