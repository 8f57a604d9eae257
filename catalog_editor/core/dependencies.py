"""
==============================================================================
FastAPI Dependencies Module
==============================================================================

Dependency injection for the catalog state container.

The state manager is created by the application lifespan and stored on
``app.state``. Route handlers receive it through ``get_state_manager``
instead of reaching for a module-level global.

Usage Examples:
--------------
    @router.get("/catalog")
    async def render(manager: CatalogStateManager = Depends(get_state_manager)):
        return manager.snapshot()

==============================================================================
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import Request

from catalog_editor.core import exceptions

if TYPE_CHECKING:
    from catalog_editor.state.manager import CatalogStateManager


# Module logger
logger = logging.getLogger(__name__)


def get_state_manager(request: Request) -> "CatalogStateManager":
    """
    Resolve the state manager attached to the running application.

    Raises:
        AppException: INTERNAL_ERROR if the lifespan has not created one
    """
    manager = getattr(request.app.state, "catalog", None)
    if manager is None:
        logger.error("Catalog state requested before application startup")
        raise exceptions.internal_error("Catalog state not initialized")
    return manager
