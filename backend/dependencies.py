"""
Dependency injection providers for FastAPI.

Repositories are built per request around the request's database session;
the Redis client is created once and shared.
"""

from functools import lru_cache
from typing import Callable, Type, TypeVar

from fastapi import Depends
from redis.asyncio import Redis
from sqlalchemy.orm import Session

from config.settings import REDIS_URL
from database import get_db
from repositories.basket_repository import BasketRepository
from repositories.generic_repository import GenericRepository

T = TypeVar('T')


def repository_provider(model: Type[T]) -> Callable[[Session], GenericRepository[T]]:
    """
    Build a FastAPI dependency that yields a GenericRepository for model.

    Args:
        model: SQLAlchemy model class

    Returns:
        Dependency callable

    Example:
        products: GenericRepository[Product] = Depends(repository_provider(Product))
    """
    def get_repository(db: Session = Depends(get_db)) -> GenericRepository[T]:
        return GenericRepository(db, model)

    get_repository.__name__ = f"get_{model.__name__.lower()}_repository"
    return get_repository


@lru_cache(maxsize=1)
def get_redis() -> Redis:
    """
    Shared Redis client for the process.

    The client manages its own connection pool; nothing connects until the
    first command.
    """
    return Redis.from_url(REDIS_URL, decode_responses=True)


def get_basket_repository(redis: Redis = Depends(get_redis)) -> BasketRepository:
    """
    Factory function for creating BasketRepository instances.

    Args:
        redis: Shared Redis client (injected)

    Returns:
        BasketRepository instance
    """
    return BasketRepository(redis)
