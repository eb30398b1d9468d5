"""
Product Response DTOs

DTOs for catalog API responses.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Generic, List, TypeVar

from config.settings import BASE_URL
from models import Product


T = TypeVar('T')


class CamelModel(BaseModel):
    """Serializes field names as camelCase, like the rest of the API."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class ProductBrandResponse(CamelModel):
    id: int
    name: str


class ProductTypeResponse(CamelModel):
    id: int
    name: str


class ProductResponse(CamelModel):
    """
    Response DTO for a product.

    Brand and type are flattened to their names and the picture path is
    turned into an absolute URL.
    """

    id: int = Field(description="Product ID")
    name: str = Field(description="Product name")
    description: str = Field(description="Product description")
    picture_url: str = Field(description="Absolute picture URL, empty if none")
    price: float = Field(description="Unit price")
    product_brand_id: int
    product_brand: str = Field(description="Brand name")
    product_type_id: int
    product_type: str = Field(description="Type name")

    @classmethod
    def from_product(cls, product: Product, base_url: str = BASE_URL) -> "ProductResponse":
        """
        Map a product whose brand and type are loaded.

        Args:
            product: Product with product_brand and product_type populated
            base_url: Prefix for the picture path

        Returns:
            ProductResponse
        """
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            picture_url=resolve_picture_url(product.picture_url, base_url),
            price=product.price,
            product_brand_id=product.product_brand_id,
            product_brand=product.product_brand.name,
            product_type_id=product.product_type_id,
            product_type=product.product_type.name,
        )


class Pagination(CamelModel, Generic[T]):
    """One page of results plus the total count across pages."""

    page_index: int
    page_size: int
    count: int
    data: List[T]


def resolve_picture_url(picture_url: str | None, base_url: str = BASE_URL) -> str:
    """Prefix a stored picture path with the public base URL."""
    if picture_url:
        return f"{base_url}{picture_url}"
    return ""
