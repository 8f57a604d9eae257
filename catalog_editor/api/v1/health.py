"""
==============================================================================
Health Check Endpoints
==============================================================================

System health status endpoints for monitoring and orchestration.

==============================================================================
"""

from fastapi import APIRouter, Request


router = APIRouter(prefix="/health", tags=["Health"])


class HealthController:
    """Controller for health check operations."""

    def __init__(self, request: Request):
        self._request = request

    def check_catalog(self) -> dict:
        """Check catalog state status."""
        manager = getattr(self._request.app.state, "catalog", None)
        if manager is not None and not manager.closed:
            return {"status": "healthy", "stats": manager.store.get_stats()}
        return {"status": "not_loaded", "stats": None}

    def get_health(self) -> dict:
        """Get full health status."""
        catalog_info = self.check_catalog()
        stats = catalog_info["stats"] or {}

        overall = "healthy" if catalog_info["status"] == "healthy" else "degraded"

        return {
            "status": overall,
            "components": {
                "api": "healthy",
                "catalog": catalog_info["status"]
            },
            "details": {
                "products_loaded": stats.get("total_products", 0),
                "products_displayed": stats.get("displayed_products", 0),
                "next_id": stats.get("next_id"),
                "categories": stats.get("categories", {})
            }
        }


@router.get("")
async def health_check(request: Request):
    """
    Health check endpoint.

    Returns system status including API and catalog state.
    """
    controller = HealthController(request)
    return controller.get_health()


@router.get("/ready")
async def readiness_check():
    """Readiness probe for container orchestration."""
    return {"ready": True}


@router.get("/live")
async def liveness_check():
    """Liveness probe for container orchestration."""
    return {"alive": True}
