"""
Server-rendered pages: login form and the sortable product table
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import JSONResponse, RedirectResponse

from ims_frontend.dependencies import (
    get_auth_service,
    get_legacy_client,
    get_notifications,
    leave_reports,
)
from ims_frontend.legacy.static_site import (
    SORTABLE_COLUMNS,
    LegacyProductClient,
    autofill_credentials,
    delete_product,
    filter_rows,
    load_products,
    sort_rows,
    validate_login_form,
    validate_search_query,
)
from ims_frontend.schemas.legacy import LegacyCredentials, LegacyLoginForm, LegacyTableView
from ims_frontend.schemas.product import DeleteConfirmation
from ims_frontend.services.auth_service import AuthService
from ims_frontend.services.inventory_client import NetworkError
from ims_frontend.services.notification_service import NotificationService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Legacy Pages"], dependencies=[Depends(leave_reports)])


@router.get("/credentials/{role}", response_model=LegacyCredentials)
async def demo_credentials(role: str):
    """Demo account filled in by a role tab on the login form"""
    credentials = autofill_credentials(role)
    if credentials is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown role tab: {role}")
    username, password = credentials
    return LegacyCredentials(username=username, password=password)


@router.post("/login")
async def legacy_login(
    form: LegacyLoginForm,
    auth: AuthService = Depends(get_auth_service),
):
    """
    Check the form locally, then sign in like the main login page
    """
    errors = validate_login_form(form.username, form.password)
    if errors:
        return JSONResponse(
            status_code=422,
            content={"detail": "Please correct the highlighted fields", "errors": errors},
        )

    try:
        ok = await auth.login(form.username, form.password)
    except NetworkError:
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"detail": "Login failed. Please try again."},
        )
    if not ok:
        return JSONResponse(status_code=status.HTTP_401_UNAUTHORIZED, content={"detail": "Login failed"})
    return RedirectResponse("/legacy/products", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/products", response_model=LegacyTableView)
def product_table(
    sort: Optional[str] = Query(None),
    q: str = Query("", max_length=200),
    client: LegacyProductClient = Depends(get_legacy_client),
    notifications: NotificationService = Depends(get_notifications),
):
    """
    Product table, optionally searched and sorted by a column
    """
    if q:
        error = validate_search_query(q)
        if error:
            notifications.error(error)
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error)
    if sort is not None and sort not in SORTABLE_COLUMNS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Cannot sort by {sort}; use one of {', '.join(SORTABLE_COLUMNS)}",
        )

    rows = load_products(client, notifications)
    if q:
        rows = filter_rows(rows, q)
    if sort:
        rows = sort_rows(rows, sort)
    return LegacyTableView(rows=rows, sort=sort, query=q)


@router.delete("/products/{product_id}")
def delete_table_product(
    product_id: int,
    confirm: bool = Query(False),
    client: LegacyProductClient = Depends(get_legacy_client),
    notifications: NotificationService = Depends(get_notifications),
):
    """
    Delete after confirmation and return the reloaded table
    """
    if not confirm:
        return JSONResponse(
            status_code=status.HTTP_428_PRECONDITION_REQUIRED,
            content=DeleteConfirmation(product_id=product_id).model_dump(),
        )

    rows = delete_product(client, product_id, notifications, confirmed=True)
    if rows is None:
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"detail": "Error deleting product"},
        )
    return LegacyTableView(rows=rows)
