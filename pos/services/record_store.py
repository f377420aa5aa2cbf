from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from typing import Any, Generic, List, Optional, TypeVar, Union
import logging

from pos.database import Base
from pos.services.errors import DuplicateKeyError, InvalidRequestError, PersistenceError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class RecordStore(Generic[ModelT]):
    """
    Generic persistent collection for one entity type.

    Every entity (products, purchases, categories, customers, settings,
    transactions, users) is stored through the same small contract:

    - find / find_one: read by equality filters or SQLAlchemy criteria
    - insert: add a record, failing with DuplicateKeyError on a key clash
    - update: partial patch (default) or whole-record replace
    - remove: delete matching records

    Mutating calls commit before returning, so callers never flush.
    Matching nothing is not an error: update and remove return 0.
    Driver failures are re-raised as PersistenceError.
    """

    def __init__(self, db: Session, model: type[ModelT]):
        self.db = db
        self.model = model
        self._columns = {column.name for column in model.__table__.columns}

    @property
    def name(self) -> str:
        return self.model.__tablename__

    def find(self, *criteria, order_by=None, **filters) -> List[ModelT]:
        """
        Get all records matching the criteria.

        Args:
            criteria: SQLAlchemy boolean expressions (e.g. Model.status == 0)
            order_by: Optional column or list of columns to sort by
            filters: Column equality filters

        Returns:
            Matching records, possibly empty
        """
        query = self.db.query(self.model).filter(*criteria).filter_by(**filters)

        if order_by is not None:
            if not isinstance(order_by, (list, tuple)):
                order_by = [order_by]
            query = query.order_by(*order_by)

        try:
            return query.all()
        except SQLAlchemyError as e:
            logger.error(f"Error reading {self.name}: {e}")
            raise PersistenceError(f"Failed to read {self.name}") from e

    def find_one(self, *criteria, **filters) -> Optional[ModelT]:
        """Get the first record matching the criteria, or None."""
        try:
            return self.db.query(self.model).filter(*criteria).filter_by(**filters).first()
        except SQLAlchemyError as e:
            logger.error(f"Error reading {self.name}: {e}")
            raise PersistenceError(f"Failed to read {self.name}") from e

    def insert(self, record: Union[ModelT, dict]) -> ModelT:
        """
        Insert a new record and commit.

        Args:
            record: Model instance or a dict of column values

        Returns:
            The stored record with its assigned identifier

        Raises:
            DuplicateKeyError: If the identifier or another unique column exists
            PersistenceError: If the write fails for any other reason
        """
        if isinstance(record, dict):
            self._check_fields(record)
            record = self.model(**record)

        if record.id is not None and self.db.get(self.model, record.id) is not None:
            raise DuplicateKeyError(f"{self.name} record with ID {record.id} already exists")

        try:
            self.db.add(record)
            self.db.commit()
            self.db.refresh(record)
        except IntegrityError as e:
            self.db.rollback()
            if "unique" in str(e.orig).lower() or "duplicate" in str(e.orig).lower():
                raise DuplicateKeyError(f"Duplicate key in {self.name}") from e
            logger.error(f"Integrity error inserting into {self.name}: {e}")
            raise PersistenceError(f"Failed to insert into {self.name}") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error inserting into {self.name}: {e}")
            raise PersistenceError(f"Failed to insert into {self.name}") from e

        return record

    def update(self, filters: dict, patch: dict, replace: bool = False) -> int:
        """
        Update records matching the filters and commit.

        Args:
            filters: Column equality filters (e.g. {"id": 5})
            patch: Column values to write
            replace: If True, every non-key column is rewritten; columns
                missing from the patch fall back to their defaults

        Returns:
            Number of records modified (0 when nothing matched)
        """
        self._check_fields(patch)
        values = self._replacement(patch) if replace else dict(patch)

        try:
            count = (
                self.db.query(self.model)
                .filter_by(**filters)
                .update(values, synchronize_session="fetch")
            )
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if "unique" in str(e.orig).lower() or "duplicate" in str(e.orig).lower():
                raise DuplicateKeyError(f"Duplicate key in {self.name}") from e
            logger.error(f"Integrity error updating {self.name}: {e}")
            raise PersistenceError(f"Failed to update {self.name}") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error updating {self.name}: {e}")
            raise PersistenceError(f"Failed to update {self.name}") from e

        return count

    def remove(self, filters: dict) -> int:
        """Delete records matching the filters. Returns the number removed."""
        try:
            count = (
                self.db.query(self.model)
                .filter_by(**filters)
                .delete(synchronize_session="fetch")
            )
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error removing from {self.name}: {e}")
            raise PersistenceError(f"Failed to remove from {self.name}") from e

        return count

    def _check_fields(self, values: dict) -> None:
        unknown = set(values) - self._columns
        if unknown:
            raise InvalidRequestError(
                f"Unknown {self.name} field(s): {', '.join(sorted(unknown))}"
            )

    def _replacement(self, patch: dict) -> dict[str, Any]:
        """Build a whole-record replacement, keeping keys and server-managed columns."""
        values = {}
        for column in self.model.__table__.columns:
            if column.primary_key:
                continue
            if column.name in patch:
                values[column.name] = patch[column.name]
            elif column.server_default is not None:
                continue
            elif column.default is not None and column.default.is_scalar:
                values[column.name] = column.default.arg
            elif column.default is not None and column.default.is_callable:
                values[column.name] = column.default.arg(None)
            else:
                values[column.name] = None
        return values
