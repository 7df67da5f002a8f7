"""Supabase implementation of the EntryRepository interface."""

import logging

from supabase import Client

from orbit_worker.domain.models import EntryUpdate
from orbit_worker.exceptions import EntryNotFoundError, PersistenceError

from .interfaces import EntryRepository

logger = logging.getLogger(__name__)


class SupabaseEntryRepository(EntryRepository):
    """Updates entry rows through the Supabase PostgREST API."""

    def __init__(self, client: Client, table_name: str = "entries"):
        self._client = client
        self._table_name = table_name

    def update(self, entry_id: str, update: EntryUpdate) -> None:
        try:
            response = (
                self._client.table(self._table_name)
                .update(update.to_record())
                .eq("id", entry_id)
                .execute()
            )
            if not response.data:
                raise EntryNotFoundError(entry_id)
        except Exception as e:
            logger.exception(
                "Supabase update failed",
                extra={"entry_id": entry_id, "status": update.status.value},
            )
            raise PersistenceError(entry_id, cause=e) from e

        logger.info(
            "Entry updated", extra={"entry_id": entry_id, "status": update.status.value}
        )
