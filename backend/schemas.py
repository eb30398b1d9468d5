from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List


# Basket Schemas
class BasketItem(BaseModel):
    """A product line in a customer's basket"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    product_name: str
    picture_url: str = ""
    price: float = Field(ge=0)
    quantity: int = Field(ge=1)
    brand: str = ""
    type: str = ""


class CustomerBasket(BaseModel):
    """Basket stored as JSON under its id in Redis"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(min_length=1)
    items: List[BasketItem] = Field(default_factory=list)
