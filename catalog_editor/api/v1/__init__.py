"""
==============================================================================
API v1 Endpoints
==============================================================================

Version 1 of the REST API.

Routers:
--------
- health: Health check endpoints
- catalog: Catalog editor events

==============================================================================
"""

from . import catalog, health

__all__ = ["catalog", "health"]
