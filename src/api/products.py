"""Product catalog API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, UploadFile

from src.api.dependencies import (
    get_catalog_service,
    get_upload_service,
    require_catalog_writer,
)
from src.schemas.auth import SessionIdentity
from src.schemas.product import (
    ProductAdded,
    ProductCreate,
    ProductRemove,
    ProductResponse,
    SuccessResponse,
    UploadResponse,
)
from src.services.catalog_service import CatalogService
from src.services.upload_service import UploadService

router = APIRouter(tags=["products"])


@router.post("/upload", response_model=UploadResponse)
async def upload_image(
    products: Annotated[UploadFile, File(description="Product image")],
    uploads: Annotated[UploadService, Depends(get_upload_service)],
):
    """Store a product image and return the URL it is served from.

    Note: This endpoint must remain async because UploadFile.read() is async.
    """
    filename = await uploads.store(products)
    return UploadResponse(image_url=uploads.public_url(filename))


@router.post("/addproduct", response_model=ProductAdded)
def add_product(
    product_data: ProductCreate,
    catalog: Annotated[CatalogService, Depends(get_catalog_service)],
    _writer: Annotated[SessionIdentity | None, Depends(require_catalog_writer)],
):
    """Add a product under the next sequential id."""
    product = catalog.add_product(product_data)
    return ProductAdded(name=product.name)


@router.post("/removeproduct", response_model=SuccessResponse)
def remove_product(
    body: ProductRemove,
    catalog: Annotated[CatalogService, Depends(get_catalog_service)],
    _writer: Annotated[SessionIdentity | None, Depends(require_catalog_writer)],
):
    """Remove a product by id. Unknown ids still report success."""
    catalog.remove_product(body.id)
    return SuccessResponse()


@router.get("/getallproducts", response_model=list[ProductResponse])
def get_all_products(
    catalog: Annotated[CatalogService, Depends(get_catalog_service)],
):
    """Get the full catalog."""
    return catalog.list_all()


@router.get("/newCollections", response_model=list[ProductResponse])
def get_new_collections(
    catalog: Annotated[CatalogService, Depends(get_catalog_service)],
):
    """Get the newest products, newest first."""
    return catalog.list_recent()
