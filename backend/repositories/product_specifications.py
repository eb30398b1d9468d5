"""
Product Specifications

Concrete specifications for querying the product catalog.
"""

from typing import Optional

from models import Product
from constants import ProductSort
from dtos.request.product_request import ProductSpecParams
from .criteria import AttributeEqualsCriterion, Criterion, combine_all
from .specifications import BaseSpecification


class ProductBrandCriterion(AttributeEqualsCriterion[Product]):
    """Products of one brand."""

    def __init__(self, brand_id: int):
        super().__init__(Product.product_brand_id, brand_id)


class ProductTypeCriterion(AttributeEqualsCriterion[Product]):
    """Products of one type."""

    def __init__(self, type_id: int):
        super().__init__(Product.product_type_id, type_id)


class ProductIdCriterion(AttributeEqualsCriterion[Product]):
    """The product with a given id."""

    def __init__(self, product_id: int):
        super().__init__(Product.id, product_id)


def build_product_filter(params: ProductSpecParams) -> Optional[Criterion[Product]]:
    """
    AND together the filters present in params.

    An absent brand or type id does not restrict that dimension.

    Returns:
        Combined criterion, or None when no filter is present
    """
    criteria = []
    if params.brand_id is not None:
        criteria.append(ProductBrandCriterion(params.brand_id))
    if params.type_id is not None:
        criteria.append(ProductTypeCriterion(params.type_id))
    return combine_all(criteria)


class ProductWithTypeAndBrandSpecification(BaseSpecification[Product]):
    """
    Filtered, sorted, paged product listing with brand and type loaded.

    Paging uses offset/limit: page N of size S skips S * (N - 1) rows and
    returns at most S.
    """

    def __init__(self, params: ProductSpecParams):
        super().__init__(build_product_filter(params))
        self.add_include(Product.product_type)
        self.add_include(Product.product_brand)

        if params.sort == ProductSort.PRICE_ASC:
            self.add_order_by_asc(Product.price)
        elif params.sort == ProductSort.PRICE_DESC:
            self.add_order_by_desc(Product.price)
        else:
            self.add_order_by_asc(Product.name)

        self.add_pagination(
            take=params.page_size,
            skip=params.page_size * (params.page_index - 1),
        )


class ProductByIdWithTypeAndBrandSpecification(BaseSpecification[Product]):
    """Single product by id with brand and type loaded."""

    def __init__(self, product_id: int):
        super().__init__(ProductIdCriterion(product_id))
        self.add_include(Product.product_type)
        self.add_include(Product.product_brand)


class ProductCountSpecification(BaseSpecification[Product]):
    """Same filter as the listing, without ordering or paging."""

    def __init__(self, params: ProductSpecParams):
        super().__init__(build_product_filter(params))
