from fastapi import APIRouter, Depends

from dependencies import get_basket_repository
from exceptions import BasketError
from repositories.basket_repository import BasketRepository
from schemas import CustomerBasket
from utils.error_handlers import handle_api_errors

router = APIRouter()


@router.get("/basket/{basket_id}", response_model=CustomerBasket)
@handle_api_errors("Get basket")
async def get_customer_basket(basket_id: str, baskets: BasketRepository = Depends(get_basket_repository)):
    """
    Get a basket by id.

    A basket that does not exist (or has expired) comes back empty rather
    than as a 404, so clients can always start adding items to it.
    """
    basket = await baskets.get_basket(basket_id)
    return basket if basket is not None else CustomerBasket(id=basket_id)


@router.post("/basket", response_model=CustomerBasket)
@handle_api_errors("Update basket")
async def create_or_update_customer_basket(
    basket: CustomerBasket,
    baskets: BasketRepository = Depends(get_basket_repository),
):
    """
    Create or replace a basket.

    Raises:
        HTTPException: 400 if the basket store refuses the write
    """
    stored = await baskets.create_or_update_basket(basket)
    if stored is None:
        raise BasketError(basket.id, "Basket could not be saved")
    return stored


@router.delete("/basket/{basket_id}", response_model=bool)
@handle_api_errors("Delete basket")
async def delete_customer_basket(basket_id: str, baskets: BasketRepository = Depends(get_basket_repository)):
    """Delete a basket. Returns False if there was nothing to delete."""
    return await baskets.delete_basket(basket_id)
