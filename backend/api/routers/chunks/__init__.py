"""
Chunks router package.

Exports the router for chunk administration endpoints.
"""

from .chunks_router import router

__all__ = ["router"]
