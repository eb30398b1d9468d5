from fastapi import APIRouter, Depends, Query
from pydantic import ValidationError as PydanticValidationError
from typing import List, Optional
import logging

from constants import PaginationDefaults
from dependencies import repository_provider
from dtos.request.product_request import ProductSpecParams
from dtos.response.product_response import (
    Pagination,
    ProductBrandResponse,
    ProductResponse,
    ProductTypeResponse,
)
from exceptions import NotFoundError, ValidationError
from models import Product, ProductBrand, ProductType
from repositories.generic_repository import GenericRepository
from repositories.product_specifications import (
    ProductByIdWithTypeAndBrandSpecification,
    ProductCountSpecification,
    ProductWithTypeAndBrandSpecification,
)
from utils.error_handlers import handle_api_errors

logger = logging.getLogger(__name__)

router = APIRouter()

get_product_repository = repository_provider(Product)
get_brand_repository = repository_provider(ProductBrand)
get_type_repository = repository_provider(ProductType)


def _parse_params(**raw) -> ProductSpecParams:
    """Validate listing parameters, reporting every invalid field."""
    try:
        return ProductSpecParams(**raw)
    except PydanticValidationError as e:
        errors = [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
        raise ValidationError("Invalid product query parameters", errors=errors) from e


@router.get("/products", response_model=Pagination[ProductResponse])
@handle_api_errors("Get products")
def get_products(
    sort: Optional[str] = Query(None, description="PriceAsc, PriceDesc; anything else sorts by name"),
    brand_id: Optional[int] = Query(None, alias="brandId"),
    type_id: Optional[int] = Query(None, alias="typeId"),
    page_index: int = Query(PaginationDefaults.DEFAULT_PAGE_INDEX, alias="pageIndex"),
    page_size: int = Query(PaginationDefaults.DEFAULT_PAGE_SIZE, alias="pageSize"),
    products: GenericRepository[Product] = Depends(get_product_repository),
):
    """
    Page through the catalog.

    Query parameters:
    - sort: PriceAsc | PriceDesc (default: name ascending)
    - brandId / typeId: optional filters, combined with AND
    - pageIndex: 1-based page number
    - pageSize: rows per page, capped at 10

    Raises:
        HTTPException: 400 if pageIndex or pageSize is below 1
    """
    params = _parse_params(
        sort=sort, brand_id=brand_id, type_id=type_id,
        page_index=page_index, page_size=page_size,
    )
    logger.debug(f"Listing products with {params!r}")

    items = products.get_all_with_spec(ProductWithTypeAndBrandSpecification(params))
    count = products.count_with_spec(ProductCountSpecification(params))

    return Pagination[ProductResponse](
        page_index=params.page_index,
        page_size=params.page_size,
        count=count,
        data=[ProductResponse.from_product(p) for p in items],
    )


@router.get("/products/brands", response_model=List[ProductBrandResponse])
@handle_api_errors("Get product brands")
def get_product_brands(brands: GenericRepository[ProductBrand] = Depends(get_brand_repository)):
    """List every brand."""
    return brands.get_all()


@router.get("/products/types", response_model=List[ProductTypeResponse])
@handle_api_errors("Get product types")
def get_product_types(types: GenericRepository[ProductType] = Depends(get_type_repository)):
    """List every product type."""
    return types.get_all()


@router.get("/products/{product_id}", response_model=ProductResponse)
@handle_api_errors("Get product")
def get_product(product_id: int, products: GenericRepository[Product] = Depends(get_product_repository)):
    """
    Get one product with its brand and type.

    Raises:
        HTTPException: 404 if the product does not exist
    """
    product = products.get_by_id_with_spec(ProductByIdWithTypeAndBrandSpecification(product_id))
    if product is None:
        raise NotFoundError("Product", product_id, message="Product doesn't exist.")
    return ProductResponse.from_product(product)
