"""
Composable Query Criteria

A criterion encapsulates a single filtering rule over an entity. It renders
as a SQLAlchemy boolean clause so filtering is pushed down to the database,
and can also be checked against an already-loaded object.

Criteria compose with AND, OR and NOT:

    ProductBrandCriterion(1) & ProductTypeCriterion(3)
    ~ProductBrandCriterion(2)
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar
from sqlalchemy import and_, or_, not_
from sqlalchemy.sql.elements import ColumnElement


T = TypeVar('T')


class Criterion(ABC, Generic[T]):
    """
    Abstract base class for criteria.

    A criterion encapsulates a single business rule or query predicate.
    """

    @abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool:
        """
        Check if a candidate object satisfies this criterion.

        Args:
            candidate: Object to check

        Returns:
            True if candidate satisfies criterion
        """
        pass

    @abstractmethod
    def to_sql_filter(self) -> ColumnElement[bool]:
        """
        Convert criterion to SQLAlchemy filter expression.

        Returns:
            SQLAlchemy filter expression
        """
        pass

    def __and__(self, other: "Criterion[T]") -> "AndCriterion[T]":
        """Combine criteria with AND."""
        return AndCriterion(self, other)

    def __or__(self, other: "Criterion[T]") -> "OrCriterion[T]":
        """Combine criteria with OR."""
        return OrCriterion(self, other)

    def __invert__(self) -> "NotCriterion[T]":
        """Negate criterion with NOT."""
        return NotCriterion(self)


class AndCriterion(Criterion[T]):
    """Criterion that combines two criteria with AND."""

    def __init__(self, left: Criterion[T], right: Criterion[T]):
        self.left = left
        self.right = right

    def is_satisfied_by(self, candidate: T) -> bool:
        """Check if candidate satisfies both criteria."""
        return self.left.is_satisfied_by(candidate) and self.right.is_satisfied_by(candidate)

    def to_sql_filter(self) -> ColumnElement[bool]:
        """Convert to SQL AND filter."""
        return and_(self.left.to_sql_filter(), self.right.to_sql_filter())

    def __repr__(self) -> str:
        return f"({self.left!r} AND {self.right!r})"


class OrCriterion(Criterion[T]):
    """Criterion that combines two criteria with OR."""

    def __init__(self, left: Criterion[T], right: Criterion[T]):
        self.left = left
        self.right = right

    def is_satisfied_by(self, candidate: T) -> bool:
        """Check if candidate satisfies either criterion."""
        return self.left.is_satisfied_by(candidate) or self.right.is_satisfied_by(candidate)

    def to_sql_filter(self) -> ColumnElement[bool]:
        """Convert to SQL OR filter."""
        return or_(self.left.to_sql_filter(), self.right.to_sql_filter())

    def __repr__(self) -> str:
        return f"({self.left!r} OR {self.right!r})"


class NotCriterion(Criterion[T]):
    """Criterion that negates another criterion."""

    def __init__(self, criterion: Criterion[T]):
        self.criterion = criterion

    def is_satisfied_by(self, candidate: T) -> bool:
        """Check if candidate does NOT satisfy criterion."""
        return not self.criterion.is_satisfied_by(candidate)

    def to_sql_filter(self) -> ColumnElement[bool]:
        """Convert to SQL NOT filter."""
        return not_(self.criterion.to_sql_filter())

    def __repr__(self) -> str:
        return f"NOT {self.criterion!r}"


class AttributeEqualsCriterion(Criterion[T]):
    """
    Equality on a single mapped column.

    Args:
        attribute: Mapped column attribute (e.g. Product.product_brand_id)
        value: Value the column must equal
    """

    def __init__(self, attribute, value):
        self.attribute = attribute
        self.value = value

    def is_satisfied_by(self, candidate: T) -> bool:
        return getattr(candidate, self.attribute.key) == self.value

    def to_sql_filter(self) -> ColumnElement[bool]:
        return self.attribute == self.value

    def __repr__(self) -> str:
        return f"{self.attribute}=={self.value!r}"


def combine_all(criteria: list[Criterion[T]]) -> Criterion[T] | None:
    """
    AND together a list of criteria.

    Returns:
        The combined criterion, or None when the list is empty
    """
    combined = None
    for criterion in criteria:
        combined = criterion if combined is None else combined & criterion
    return combined
