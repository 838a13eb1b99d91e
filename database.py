"""
Database Operations
Table-scoped store adapter used by the ingestion and live refresh jobs
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence, Type

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models import Base, create_database, get_session

logger = logging.getLogger(__name__)

_DIALECT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class StoreError(RuntimeError):
    """A store operation failed; the session has already been rolled back."""

    def __init__(self, table: str, message: str):
        super().__init__(f"{table}: {message}")
        self.table = table


class KnowledgeBaseStore:
    """Upsert/select/update/delete against the knowledge base tables.

    Every write commits on its own, so each sub-entity write is independently
    durable. Any SQLAlchemy failure rolls the session back and surfaces as a
    StoreError naming the table.
    """

    def __init__(self, session: Session):
        self.session = session

    # ==================== WRITE OPERATIONS ====================

    def upsert(
        self,
        model: Type[Base],
        rows: Sequence[Dict[str, Any]],
        conflict_key: Sequence[str],
    ) -> List[Base]:
        """Insert rows, updating non-key columns when the conflict key already exists.

        Returns the stored rows, in input order.
        """
        table = model.__table__
        try:
            insert = _DIALECT_INSERTS[self.session.get_bind().dialect.name]
        except KeyError:
            raise StoreError(table.name, "upsert is not supported on this database dialect")

        try:
            for row in rows:
                stmt = insert(table).values(**row)
                changes = {k: stmt.excluded[k] for k in row if k not in conflict_key}
                if changes:
                    stmt = stmt.on_conflict_do_update(index_elements=list(conflict_key), set_=changes)
                else:
                    stmt = stmt.on_conflict_do_nothing(index_elements=list(conflict_key))
                self.session.execute(stmt)
            self.session.commit()
        except SQLAlchemyError as e:
            self._fail(table.name, e)

        return [
            self.select_one(model, **{k: row[k] for k in conflict_key})
            for row in rows
        ]

    def insert(self, model: Type[Base], row: Dict[str, Any]) -> Base:
        """Insert a single row and return it with its generated id"""
        obj = model(**row)
        try:
            self.session.add(obj)
            self.session.commit()
        except SQLAlchemyError as e:
            self._fail(model.__tablename__, e)
        return obj

    def update(self, model: Type[Base], patch: Dict[str, Any], *criteria, **filters) -> int:
        """Apply patch to every matching row; returns the number of rows touched"""
        try:
            count = self._query(model, criteria, filters).update(patch, synchronize_session=False)
            self.session.commit()
        except SQLAlchemyError as e:
            self._fail(model.__tablename__, e)
        return count

    def delete(self, model: Type[Base], *criteria, **filters) -> int:
        """Delete every matching row; returns the number of rows removed"""
        try:
            count = self._query(model, criteria, filters).delete(synchronize_session=False)
            self.session.commit()
        except SQLAlchemyError as e:
            self._fail(model.__tablename__, e)
        return count

    # ==================== READ OPERATIONS ====================

    def select(
        self,
        model: Type[Base],
        *criteria,
        order_by: Iterable[Any] = (),
        limit: Optional[int] = None,
        **filters,
    ) -> List[Base]:
        """Select rows matching keyword equality filters and SQL criteria"""
        try:
            query = self._query(model, criteria, filters)
            order_by = list(order_by)
            if order_by:
                query = query.order_by(*order_by)
            if limit:
                query = query.limit(limit)
            return query.all()
        except SQLAlchemyError as e:
            self._fail(model.__tablename__, e)

    def select_one(self, model: Type[Base], *criteria, **filters) -> Optional[Base]:
        """First matching row by id, or None"""
        rows = self.select(model, *criteria, order_by=list(model.__table__.primary_key.columns),
                           limit=1, **filters)
        return rows[0] if rows else None

    # ==================== HELPERS ====================

    def _query(self, model, criteria, filters):
        query = self.session.query(model)
        if filters:
            query = query.filter_by(**filters)
        if criteria:
            query = query.filter(*criteria)
        return query

    def _fail(self, table: str, error: SQLAlchemyError):
        self.session.rollback()
        logger.debug("Store operation on %s failed: %s", table, error)
        raise StoreError(table, str(error.__cause__ or error)) from error

    def close(self):
        self.session.close()


# Convenience function for the jobs
def open_store(db_url: str, create_tables: bool = True) -> KnowledgeBaseStore:
    """Open a store on db_url, creating missing tables first"""
    try:
        if create_tables:
            create_database(db_url)
        return KnowledgeBaseStore(get_session(db_url))
    except SQLAlchemyError as e:
        raise StoreError("schema", str(e)) from e
