"""SQLAlchemy implementation of the EntryRepository interface."""

import logging

from sqlalchemy import Engine, Table

from orbit_worker.domain.models import EntryUpdate
from orbit_worker.exceptions import EntryNotFoundError, PersistenceError

from .interfaces import EntryRepository

logger = logging.getLogger(__name__)


class SQLEntryRepository(EntryRepository):
    """
    Updates entry rows directly in a SQL database.

    Used when the worker talks to the Postgres instance behind the managed
    backend instead of its REST API.
    """

    def __init__(self, engine: Engine, table: Table):
        self._engine = engine
        self._table = table

    def update(self, entry_id: str, update: EntryUpdate) -> None:
        statement = (
            self._table.update()
            .where(self._table.c.id == entry_id)
            .values(**update.to_record())
        )
        try:
            with self._engine.begin() as connection:
                result = connection.execute(statement)
                if result.rowcount == 0:
                    raise EntryNotFoundError(entry_id)
        except Exception as e:
            logger.exception(
                "Failed to update entry",
                extra={
                    "entry_id": entry_id,
                    "table": self._table.name,
                    "status": update.status.value,
                },
            )
            raise PersistenceError(entry_id, cause=e) from e

        logger.info(
            "Entry updated", extra={"entry_id": entry_id, "status": update.status.value}
        )
