"""
Specification Evaluator

Turns a Specification into a SQLAlchemy Query. Nothing is executed here;
the caller decides when to materialize the result (.all(), .first(), ...).
"""

from typing import Generic, TypeVar
from sqlalchemy.orm import Query, joinedload

from .specifications import Specification


T = TypeVar('T')


class SpecificationEvaluator(Generic[T]):
    """Builds queries from specifications."""

    @staticmethod
    def get_query(input_query: Query, specification: Specification[T]) -> Query:
        """
        Apply a specification to a base query.

        Stages run in a fixed order: filter, order, offset/limit, eager
        loads. A specification carrying both orderings is sorted descending
        only; BaseSpecification never produces one.

        Args:
            input_query: Base query (e.g. db.query(Product))
            specification: Query description to apply

        Returns:
            Composed, unexecuted query
        """
        query = input_query

        if specification.criteria is not None:
            query = query.filter(specification.criteria.to_sql_filter())

        if specification.order_by_desc is not None:
            query = query.order_by(specification.order_by_desc.desc())
        elif specification.order_by_asc is not None:
            query = query.order_by(specification.order_by_asc.asc())

        if specification.is_pagination_enabled:
            query = query.offset(specification.skip).limit(specification.take)

        for relation in specification.includes:
            query = query.options(joinedload(relation))

        return query
