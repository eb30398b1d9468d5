"""Tests for BasketRepository."""

import logging
from datetime import timedelta
from unittest.mock import AsyncMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from repositories.basket_repository import BasketRepository
from schemas import BasketItem, CustomerBasket


def _basket(basket_id="basket-1"):
    return CustomerBasket(id=basket_id, items=[
        BasketItem(id=3, product_name="Core Blue Hat", price=10, quantity=2, brand="NetCore", type="Hats"),
    ])


@pytest.fixture
def redis_client():
    return AsyncMock()


@pytest.fixture
def baskets(redis_client):
    return BasketRepository(redis_client, ttl=timedelta(days=1))


@pytest.mark.asyncio
class TestBasketRepository:
    async def test_get_missing_returns_none(self, baskets, redis_client):
        redis_client.get.return_value = None

        assert await baskets.get_basket("nope") is None
        redis_client.get.assert_awaited_once_with("nope")

    async def test_get_parses_stored_json(self, baskets, redis_client):
        stored = _basket()
        redis_client.get.return_value = stored.model_dump_json(by_alias=True)

        basket = await baskets.get_basket("basket-1")

        assert basket == stored
        assert basket.items[0].product_name == "Core Blue Hat"

    async def test_create_or_update_writes_with_ttl_and_reads_back(self, baskets, redis_client):
        basket = _basket()
        payload = basket.model_dump_json(by_alias=True)
        redis_client.set.return_value = True
        redis_client.get.return_value = payload

        result = await baskets.create_or_update_basket(basket)

        assert result == basket
        redis_client.set.assert_awaited_once_with("basket-1", payload, ex=timedelta(days=1))
        redis_client.get.assert_awaited_once_with("basket-1")

    async def test_stored_json_uses_camel_case(self, baskets, redis_client):
        redis_client.set.return_value = True
        redis_client.get.return_value = None

        await baskets.create_or_update_basket(_basket())

        payload = redis_client.set.await_args.args[1]
        assert '"productName":"Core Blue Hat"' in payload
        assert '"pictureUrl"' in payload

    async def test_refused_write_returns_none(self, baskets, redis_client):
        redis_client.set.return_value = None

        assert await baskets.create_or_update_basket(_basket()) is None
        redis_client.get.assert_not_awaited()

    @pytest.mark.parametrize("deleted, expected", [(1, True), (0, False)])
    async def test_delete(self, baskets, redis_client, deleted, expected):
        redis_client.delete.return_value = deleted

        assert await baskets.delete_basket("basket-1") is expected
        redis_client.delete.assert_awaited_once_with("basket-1")

    async def test_redis_errors_propagate(self, baskets, redis_client):
        redis_client.get.side_effect = RedisConnectionError("down")

        with pytest.raises(RedisConnectionError):
            await baskets.get_basket("basket-1")

    async def test_log_records_carry_basket_id(self, baskets, redis_client, caplog):
        redis_client.get.return_value = None
        caplog.set_level(logging.INFO, logger="repositories.basket_repository")

        await baskets.get_basket("b-1")

        started = next(r for r in caplog.records if r.getMessage() == "Starting get_basket")
        assert started.basket_id == "b-1"
        assert started.operation == "get_basket"

    async def test_write_log_records_take_basket_id_from_basket(self, baskets, redis_client, caplog):
        redis_client.set.return_value = True
        redis_client.get.return_value = None
        caplog.set_level(logging.INFO, logger="repositories.basket_repository")

        await baskets.create_or_update_basket(_basket("b-2"))

        completed = next(r for r in caplog.records if r.getMessage() == "Completed create_or_update_basket")
        assert completed.basket_id == "b-2"

    async def test_failed_operation_is_logged_with_error(self, baskets, redis_client, caplog):
        redis_client.delete.side_effect = RedisConnectionError("down")
        caplog.set_level(logging.INFO, logger="repositories.basket_repository")

        with pytest.raises(RedisConnectionError):
            await baskets.delete_basket(basket_id="b-3")

        failed = next(r for r in caplog.records if r.getMessage() == "Failed delete_basket")
        assert failed.levelno == logging.ERROR
        assert failed.basket_id == "b-3"
        assert failed.error_type == "ConnectionError"
