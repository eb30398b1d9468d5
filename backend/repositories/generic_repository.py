"""
Generic read repository driven by specifications.
"""

from typing import Generic, TypeVar, List, Optional, Type
from sqlalchemy.orm import Query, Session

from utils.logging_utils import StructuredLogger
from .specification_evaluator import SpecificationEvaluator
from .specifications import Specification

T = TypeVar('T')

logger = StructuredLogger(__name__)


class GenericRepository(Generic[T]):
    """
    Generic repository for read queries over one model.

    Holds a reference to the caller's session and nothing else; create one
    per request. Database errors are not caught here.
    """

    def __init__(self, db: Session, model: Type[T]):
        """
        Initialize the repository.

        Args:
            db: SQLAlchemy database session
            model: SQLAlchemy model class
        """
        self.db = db
        self.model = model

    def get_all(self) -> List[T]:
        """
        Retrieve all records.

        Returns:
            List of model instances
        """
        return self.db.query(self.model).all()

    def get_by_id(self, id: int) -> Optional[T]:
        """
        Retrieve a record by its ID.

        Args:
            id: Primary key value

        Returns:
            Model instance or None if not found
        """
        return self.db.get(self.model, id)

    def get_all_with_spec(self, specification: Specification[T]) -> List[T]:
        """
        Retrieve every record matching a specification.

        Args:
            specification: Filter, ordering, paging and eager loads to apply

        Returns:
            List of model instances (empty if nothing matches)
        """
        return self._apply_specification(specification).all()

    def get_by_id_with_spec(self, specification: Specification[T]) -> Optional[T]:
        """
        Retrieve the first record matching a specification.

        Args:
            specification: Typically an identity criterion plus eager loads

        Returns:
            Model instance or None if not found
        """
        return self._apply_specification(specification).first()

    def count_with_spec(self, specification: Specification[T]) -> int:
        """
        Count records matching a specification's criteria.

        Ordering, paging and eager loads are ignored so the count covers
        every page.

        Args:
            specification: Specification whose criteria to count

        Returns:
            Number of matching records
        """
        query = self.db.query(self.model)
        if specification.criteria is not None:
            query = query.filter(specification.criteria.to_sql_filter())
        return query.count()

    def _apply_specification(self, specification: Specification[T]) -> Query:
        logger.debug("Applying specification", extra={
            "model": self.model.__name__,
            "specification": repr(specification),
        })
        return SpecificationEvaluator.get_query(self.db.query(self.model), specification)
