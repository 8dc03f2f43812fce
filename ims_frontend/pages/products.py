"""
Products Pages: list, search, delete, add and edit
"""
import logging

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse, RedirectResponse

from ims_frontend.dependencies import (
    get_auth_service,
    get_catalog,
    get_inventory_client,
    get_notifications,
    leave_reports,
    require_auth,
    require_permission,
)
from ims_frontend.schemas.product import (
    DeleteConfirmation,
    ProductFormData,
    ProductFormView,
    ProductListView,
)
from ims_frontend.services.auth_service import AuthService
from ims_frontend.services.catalog_service import ProductCatalog
from ims_frontend.services.inventory_client import (
    ApiError,
    BadRequestError,
    InventoryClient,
    NetworkError,
    SessionExpiredError,
)
from ims_frontend.services.notification_service import NotificationService
from ims_frontend.utils.forms import FormValidationError, validate_product_form

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Products"], dependencies=[Depends(leave_reports), Depends(require_auth)])


def _list_view(catalog: ProductCatalog, auth: AuthService) -> ProductListView:
    return ProductListView(
        products=catalog.filtered,
        total=len(catalog.products),
        search=catalog.search_term,
        can_create=auth.has_permission("create_products"),
        can_edit=auth.has_permission("edit_products"),
        can_delete=auth.has_permission("delete_products"),
    )


def _invalid_form(exc: FormValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"detail": "Please correct the highlighted fields", "errors": exc.errors},
    )


def _submission_failed(exc: Exception, notifications: NotificationService, fallback: str) -> JSONResponse:
    """
    Map a failed create/update to a notification and response.
    401 is re-raised so the app redirects to /login.
    """
    if isinstance(exc, SessionExpiredError):
        notifications.error("Authentication failed. Please login again.")
        raise exc
    if isinstance(exc, BadRequestError):
        notifications.error("Invalid data. Please check your input.")
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": "Invalid data"})
    if isinstance(exc, NetworkError):
        notifications.error("Network error. Please check your connection.")
        return JSONResponse(status_code=status.HTTP_502_BAD_GATEWAY, content={"detail": "Network error"})
    message = getattr(exc, "message", None) or fallback
    notifications.error(f"Error: {message}")
    return JSONResponse(status_code=status.HTTP_502_BAD_GATEWAY, content={"detail": message})


@router.get("", response_model=ProductListView)
async def list_products(
    search: str = Query("", max_length=200),
    auth: AuthService = Depends(get_auth_service),
    client: InventoryClient = Depends(get_inventory_client),
    catalog: ProductCatalog = Depends(get_catalog),
    notifications: NotificationService = Depends(get_notifications),
):
    """
    Fetch all products and apply the search filter
    """
    try:
        products = await client.list_products()
    except SessionExpiredError:
        raise
    except (ApiError, NetworkError) as e:
        logger.error(f"Error fetching products: {e}")
        notifications.error("Failed to load products. Please try again.")
        products = []

    catalog.load(products)
    catalog.search(search)
    return _list_view(catalog, auth)


@router.get("/search", response_model=ProductListView)
async def search_products(
    q: str = Query("", max_length=200),
    auth: AuthService = Depends(get_auth_service),
    catalog: ProductCatalog = Depends(get_catalog),
):
    """
    Re-filter the last fetched list without calling the backend
    """
    catalog.search(q)
    return _list_view(catalog, auth)


@router.delete("/{product_id}")
async def delete_product(
    product_id: int,
    confirm: bool = Query(False),
    auth: AuthService = Depends(get_auth_service),
    client: InventoryClient = Depends(get_inventory_client),
    catalog: ProductCatalog = Depends(get_catalog),
    notifications: NotificationService = Depends(get_notifications),
):
    """
    Delete a product, then reload the list from the backend

    Needs delete_products and confirm=true
    """
    if not auth.has_permission("delete_products"):
        notifications.error("You do not have permission to delete products.")
        return JSONResponse(
            status_code=status.HTTP_403_FORBIDDEN,
            content={"detail": "Permission required: delete_products"},
        )

    if not confirm:
        return JSONResponse(
            status_code=status.HTTP_428_PRECONDITION_REQUIRED,
            content=DeleteConfirmation(product_id=product_id).model_dump(),
        )

    try:
        await client.delete_product(product_id)
    except SessionExpiredError:
        raise
    except (ApiError, NetworkError) as e:
        logger.error(f"Error deleting product {product_id}: {e}")
        notifications.error("Failed to delete product. Please try again.")
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"detail": "Failed to delete product"},
        )

    notifications.success("Product deleted successfully!")
    return await list_products(
        search=catalog.search_term,
        auth=auth,
        client=client,
        catalog=catalog,
        notifications=notifications,
    )


@router.get(
    "/add",
    response_model=ProductFormView,
    dependencies=[Depends(require_permission("create_products"))],
)
async def add_product_page():
    return ProductFormView(form=ProductFormData())


@router.post("/add", dependencies=[Depends(require_permission("create_products"))])
async def add_product(
    form: ProductFormData,
    client: InventoryClient = Depends(get_inventory_client),
    notifications: NotificationService = Depends(get_notifications),
):
    """
    Validate the form locally, then create the product
    """
    try:
        payload = validate_product_form(form)
    except FormValidationError as e:
        return _invalid_form(e)

    try:
        product = await client.create_product(payload)
    except (ApiError, NetworkError) as e:
        logger.error(f"Error adding product: {e}")
        return _submission_failed(e, notifications, "Failed to add product")

    logger.info(f"Created product {product.id} ({product.name})")
    notifications.success("Product added successfully!")
    return RedirectResponse("/products", status_code=status.HTTP_303_SEE_OTHER)


@router.get(
    "/edit/{product_id}",
    response_model=ProductFormView,
    dependencies=[Depends(require_permission("edit_products"))],
)
async def edit_product_page(
    product_id: int,
    client: InventoryClient = Depends(get_inventory_client),
    notifications: NotificationService = Depends(get_notifications),
):
    """
    Load the product into the form; a failed load returns an empty,
    unusable form (loaded=false)
    """
    try:
        product = await client.get_product(product_id)
    except SessionExpiredError:
        notifications.error("Failed to load product. Please try again.")
        raise
    except (ApiError, NetworkError) as e:
        logger.error(f"Error fetching product {product_id}: {e}")
        notifications.error("Failed to load product. Please try again.")
        return ProductFormView(product_id=product_id, form=ProductFormData(), loaded=False)

    return ProductFormView(product_id=product_id, form=ProductFormData.from_product(product))


@router.post("/edit/{product_id}", dependencies=[Depends(require_permission("edit_products"))])
async def edit_product(
    product_id: int,
    form: ProductFormData,
    client: InventoryClient = Depends(get_inventory_client),
    notifications: NotificationService = Depends(get_notifications),
):
    """
    Validate the form locally, then update the product
    """
    try:
        payload = validate_product_form(form)
    except FormValidationError as e:
        return _invalid_form(e)

    try:
        await client.update_product(product_id, payload)
    except (ApiError, NetworkError) as e:
        logger.error(f"Error updating product {product_id}: {e}")
        return _submission_failed(e, notifications, "Failed to update product")

    notifications.success("Product updated successfully!")
    return RedirectResponse("/products", status_code=status.HTTP_303_SEE_OTHER)
