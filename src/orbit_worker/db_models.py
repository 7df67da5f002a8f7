"""Table definition for journal entries in a SQL store."""

from sqlalchemy import JSON, Column, MetaData, String, Table, Text

from orbit_worker.domain.models import EntryStatus


def entries_table(name: str = "entries", metadata: MetaData | None = None) -> Table:
    """
    Builds the entries table under the configured name.

    Each call gets its own MetaData unless one is passed, so creating the
    schema only ever touches this table.
    """
    return Table(
        name,
        metadata if metadata is not None else MetaData(),
        Column("id", String, primary_key=True),
        Column("user_id", String, index=True),
        Column("audio_url", Text),
        Column("transcript", Text),
        Column("summary", Text),
        Column("key_insights", JSON),
        Column(
            "status",
            String(32),
            nullable=False,
            default=EntryStatus.PENDING.value,
        ),
    )
