"""
Specification Pattern Implementation

A specification describes a read query without running it: which rows to
keep, which relationships to load alongside them, how to order them and
which page window to return. Repositories hand specifications to
SpecificationEvaluator, which turns them into a SQLAlchemy Query.

Benefits:
- Query intent lives in small, named, testable classes
- Repositories stay generic (no per-entity query methods)
- Filtering, ordering and paging are pushed down to SQL
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

from sqlalchemy.orm import InstrumentedAttribute

from .criteria import Criterion


T = TypeVar('T')


class Specification(ABC, Generic[T]):
    """
    Read-only contract consumed by SpecificationEvaluator.
    """

    @property
    @abstractmethod
    def criteria(self) -> Optional[Criterion[T]]:
        """Row filter, or None to keep every row."""

    @property
    @abstractmethod
    def includes(self) -> List[InstrumentedAttribute]:
        """Relationships to eager-load, in the order they were added."""

    @property
    @abstractmethod
    def order_by_asc(self) -> Optional[InstrumentedAttribute]:
        """Column to sort ascending by."""

    @property
    @abstractmethod
    def order_by_desc(self) -> Optional[InstrumentedAttribute]:
        """Column to sort descending by."""

    @property
    @abstractmethod
    def take(self) -> int:
        """Maximum number of rows in the page window."""

    @property
    @abstractmethod
    def skip(self) -> int:
        """Number of rows before the page window."""

    @property
    @abstractmethod
    def is_pagination_enabled(self) -> bool:
        """Whether skip/take are applied."""


class BaseSpecification(Specification[T]):
    """
    Base class for concrete specifications.

    Subclasses pass their criterion to __init__ and call the add_* methods
    from their own constructor. Instances are not modified afterwards.

    Pagination is off until add_pagination() is called.
    """

    def __init__(self, criteria: Optional[Criterion[T]] = None):
        """
        Initialize specification.

        Args:
            criteria: Row filter (None keeps every row)
        """
        self._criteria = criteria
        self._includes: List[InstrumentedAttribute] = []
        self._order_by_asc: Optional[InstrumentedAttribute] = None
        self._order_by_desc: Optional[InstrumentedAttribute] = None
        self._take = 0
        self._skip = 0
        self._is_pagination_enabled = False

    @property
    def criteria(self) -> Optional[Criterion[T]]:
        return self._criteria

    @property
    def includes(self) -> List[InstrumentedAttribute]:
        return list(self._includes)

    @property
    def order_by_asc(self) -> Optional[InstrumentedAttribute]:
        return self._order_by_asc

    @property
    def order_by_desc(self) -> Optional[InstrumentedAttribute]:
        return self._order_by_desc

    @property
    def take(self) -> int:
        return self._take

    @property
    def skip(self) -> int:
        return self._skip

    @property
    def is_pagination_enabled(self) -> bool:
        return self._is_pagination_enabled

    def add_include(self, relation: InstrumentedAttribute) -> None:
        """
        Eager-load a relationship with the result rows.

        Args:
            relation: Relationship attribute (e.g. Product.product_brand)
        """
        self._includes.append(relation)

    def add_order_by_asc(self, key: InstrumentedAttribute) -> None:
        """Sort ascending by key, replacing any previous ordering."""
        self._order_by_asc = key
        self._order_by_desc = None

    def add_order_by_desc(self, key: InstrumentedAttribute) -> None:
        """Sort descending by key, replacing any previous ordering."""
        self._order_by_desc = key
        self._order_by_asc = None

    def add_pagination(self, take: int, skip: int) -> None:
        """
        Enable the page window.

        Args:
            take: Maximum number of rows to return
            skip: Number of rows to skip before the window
        """
        self._is_pagination_enabled = True
        self._take = take
        self._skip = skip

    def __repr__(self) -> str:
        order = None
        if self._order_by_asc is not None:
            order = f"{self._order_by_asc} ASC"
        elif self._order_by_desc is not None:
            order = f"{self._order_by_desc} DESC"
        page = f"skip={self._skip} take={self._take}" if self._is_pagination_enabled else "off"
        return (
            f"<{type(self).__name__} criteria={self._criteria!r} order={order} "
            f"page={page} includes={[str(rel) for rel in self._includes]}>"
        )
