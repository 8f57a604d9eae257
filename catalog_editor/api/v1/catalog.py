"""
==============================================================================
Catalog Editor Endpoints
==============================================================================

View adapter for the catalog editor. Each route forwards one user event to
the state manager and answers with the snapshot to render.

Events:
-------
- GET  /catalog                          → render
- PUT  /catalog/search                   → search box change
- PUT  /catalog/form/fields/{field}      → form input change
- POST /catalog/form/edit/{product_id}   → edit button
- POST /catalog/form/cancel              → dialog cancel
- POST /catalog/form/submit              → dialog submit
- POST /catalog/delete/{product_id}      → delete button
- POST /catalog/delete/confirm           → delete dialog confirm
- POST /catalog/delete/cancel            → delete dialog cancel

==============================================================================
"""

from fastapi import APIRouter, Depends

from catalog_editor.core import exceptions
from catalog_editor.core.dependencies import get_state_manager
from catalog_editor.schemas.catalog import (
    CatalogSnapshot,
    CategoryListResponse,
    FieldUpdate,
    FormField,
    SearchRequest,
    SubmitResponse,
)
from catalog_editor.state.manager import CatalogStateManager


router = APIRouter(prefix="/catalog", tags=["Catalog"])


class CatalogController:
    """Controller translating HTTP events into state manager calls."""

    def __init__(self, manager: CatalogStateManager):
        self._manager = manager

    def render(self) -> CatalogSnapshot:
        return self._manager.snapshot()

    def get_categories(self) -> CategoryListResponse:
        """Get category options."""
        return CategoryListResponse(
            locale=self._manager.locale,
            categories=self._manager.categories
        )

    def search(self, query: str) -> CatalogSnapshot:
        self._manager.change_query(query)
        return self._manager.snapshot()

    def set_field(self, field: str, value: str) -> CatalogSnapshot:
        if field == "category":
            self._manager.select_category(value)
        else:
            self._manager.set_field(field, value)
        return self._manager.snapshot()

    def begin_edit(self, product_id: int) -> CatalogSnapshot:
        self._manager.begin_edit(product_id)
        return self._manager.snapshot()

    def cancel_edit(self) -> CatalogSnapshot:
        self._manager.cancel_edit()
        return self._manager.snapshot()

    def submit(self) -> SubmitResponse:
        """Submit the dialog; an invalid draft is reported as not committed."""
        committed = self._manager.submit()
        return SubmitResponse(
            committed=committed,
            snapshot=self._manager.snapshot()
        )

    def request_delete(self, product_id: int) -> CatalogSnapshot:
        """Open the delete dialog for a listed product."""
        if product_id not in self._manager.store:
            raise exceptions.product_not_found(product_id)
        self._manager.request_delete(product_id)
        return self._manager.snapshot()

    def confirm_delete(self) -> CatalogSnapshot:
        self._manager.confirm_delete()
        return self._manager.snapshot()

    def cancel_delete(self) -> CatalogSnapshot:
        self._manager.cancel_delete()
        return self._manager.snapshot()


@router.get("", response_model=CatalogSnapshot)
async def render_catalog(manager: CatalogStateManager = Depends(get_state_manager)):
    """Current editor state."""
    return CatalogController(manager).render()


@router.get("/categories", response_model=CategoryListResponse)
async def get_categories(manager: CatalogStateManager = Depends(get_state_manager)):
    """Category options for the selection control."""
    return CatalogController(manager).get_categories()


@router.put("/search", response_model=CatalogSnapshot)
async def change_search(
    data: SearchRequest,
    manager: CatalogStateManager = Depends(get_state_manager)
):
    """Filter the table by id, name or category."""
    return CatalogController(manager).search(data.query)


@router.put("/form/fields/{field}", response_model=CatalogSnapshot)
async def change_field(
    field: FormField,
    data: FieldUpdate,
    manager: CatalogStateManager = Depends(get_state_manager)
):
    """Update one form input."""
    return CatalogController(manager).set_field(field, data.value)


@router.post("/form/edit/{product_id}", response_model=CatalogSnapshot)
async def begin_edit(
    product_id: int,
    manager: CatalogStateManager = Depends(get_state_manager)
):
    """Load a product into the form dialog."""
    return CatalogController(manager).begin_edit(product_id)


@router.post("/form/cancel", response_model=CatalogSnapshot)
async def cancel_edit(manager: CatalogStateManager = Depends(get_state_manager)):
    """Close the form dialog and clear the draft."""
    return CatalogController(manager).cancel_edit()


@router.post("/form/submit", response_model=SubmitResponse)
async def submit_form(manager: CatalogStateManager = Depends(get_state_manager)):
    """Add a new product or save the one being edited."""
    return CatalogController(manager).submit()


@router.post("/delete/confirm", response_model=CatalogSnapshot)
async def confirm_delete(manager: CatalogStateManager = Depends(get_state_manager)):
    """Delete the product awaiting confirmation."""
    return CatalogController(manager).confirm_delete()


@router.post("/delete/cancel", response_model=CatalogSnapshot)
async def cancel_delete(manager: CatalogStateManager = Depends(get_state_manager)):
    """Close the delete dialog without deleting."""
    return CatalogController(manager).cancel_delete()


@router.post("/delete/{product_id}", response_model=CatalogSnapshot)
async def request_delete(
    product_id: int,
    manager: CatalogStateManager = Depends(get_state_manager)
):
    """Ask for confirmation before deleting a product."""
    return CatalogController(manager).request_delete(product_id)
