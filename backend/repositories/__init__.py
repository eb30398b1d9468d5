"""
Repository layer for data access abstraction.

Catalog reads go through GenericRepository with a Specification describing
the query; baskets live in Redis behind BasketRepository.
"""

from .generic_repository import GenericRepository
from .basket_repository import BasketRepository
from .specifications import Specification, BaseSpecification
from .specification_evaluator import SpecificationEvaluator

__all__ = [
    "GenericRepository",
    "BasketRepository",
    "Specification",
    "BaseSpecification",
    "SpecificationEvaluator",
]
