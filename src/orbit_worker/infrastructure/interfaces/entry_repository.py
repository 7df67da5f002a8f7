"""Abstract interface for entry persistence."""

from abc import ABC, abstractmethod

from orbit_worker.domain.models import EntryUpdate


class EntryRepository(ABC):
    """Abstract base class for the entries store."""

    @abstractmethod
    def update(self, entry_id: str, update: EntryUpdate) -> None:
        """
        Writes the given fields to the entry row with this id.

        Last write wins; there is no concurrency check.

        Args:
            entry_id: Id of the entry row.
            update: Fields to write.

        Raises:
            PersistenceError: If the update fails or matches no row.
        """
