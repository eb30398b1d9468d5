"""
Basket repository backed by Redis.

Baskets are stored as JSON strings keyed by basket id and expire after
BASKET_TTL_DAYS. Redis errors are not caught here.
"""

from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING, Optional

from config.settings import BASKET_TTL_DAYS
from schemas import CustomerBasket
from utils.logging_utils import StructuredLogger, log_operation

if TYPE_CHECKING:
    from redis.asyncio import Redis

logger = StructuredLogger(__name__)


class BasketRepository:
    """Repository for customer baskets."""

    def __init__(self, redis_client: Redis, ttl: timedelta = timedelta(days=BASKET_TTL_DAYS)):
        """
        Initialize the repository.

        Args:
            redis_client: Async Redis client
            ttl: Expiry applied on every write
        """
        self._redis = redis_client
        self._ttl = ttl

    @log_operation("get_basket")
    async def get_basket(self, basket_id: str) -> Optional[CustomerBasket]:
        """
        Load a basket.

        Args:
            basket_id: Basket key

        Returns:
            The stored basket, or None if absent or expired
        """
        value = await self._redis.get(basket_id)
        if value is None:
            return None
        return CustomerBasket.model_validate_json(value)

    @log_operation("create_or_update_basket")
    async def create_or_update_basket(self, basket: CustomerBasket) -> Optional[CustomerBasket]:
        """
        Store a basket, replacing any previous version and resetting its expiry.

        Args:
            basket: Basket to store

        Returns:
            The basket as read back from Redis, or None if the write was refused
        """
        created_or_updated = await self._redis.set(
            basket.id, basket.model_dump_json(by_alias=True), ex=self._ttl
        )
        if not created_or_updated:
            logger.warning("Basket write refused", extra={"basket_id": basket.id})
            return None
        return await self.get_basket(basket.id)

    @log_operation("delete_basket")
    async def delete_basket(self, basket_id: str) -> bool:
        """
        Remove a basket.

        Returns:
            True if a basket was deleted, False if none existed
        """
        return await self._redis.delete(basket_id) > 0
