"""
pgsimple/repositories/note_repo.py
----------------------------------
Data access layer for notes, built on the Database facade.
"""

from typing import Optional

from pgsimple.db.database import Database
from pgsimple.models.note import NOTES, Note
from pgsimple.query.builder import Query
from pgsimple.utils.logger import get_logger

logger = get_logger(__name__)


class NoteRepository:
    """Repository for CRUD operations on the notes table."""

    def __init__(self, conn):
        self.conn = conn
        self.db = Database(conn)

    def _by_id(self, note_id: int) -> Query[Note]:
        return Query.from_(NOTES).filtered([("id = $1", [note_id])])

    # ── CREATE ────────────────────────────────────────────

    def add(self, title: str, content: str) -> Note:
        """
        Insert a new note.

        Returns:
            The stored Note with its `id` populated.
        """
        try:
            note = self.db.insert(NOTES, [title, content])
            self.conn.commit()
            logger.info(f"Added note #{note.id}")
            return note
        except Exception as e:
            self.conn.rollback()
            logger.error(f"Failed to add note: {e}")
            raise

    # ── READ ──────────────────────────────────────────────

    def get(self, note_id: int) -> Optional[Note]:
        """Fetch a single note by ID, or None if not found."""
        return self.db.one(self._by_id(note_id).selecting(["*"]))

    def list_all(self) -> list[Note]:
        return self.db.all(Query.from_(NOTES).selecting(["*"]))

    def search_title(self, pattern: str) -> list[Note]:
        """Fetch notes whose title matches an ILIKE pattern."""
        query = (
            Query.from_(NOTES)
            .selecting(NOTES.field_names)
            .filtered([("title ILIKE $1", [pattern])])
        )
        return self.db.all(query)

    # ── UPDATE ────────────────────────────────────────────

    def rename(self, note_id: int, title: str) -> Note:
        """Change a note's title and return the updated note."""
        try:
            note = self.db.update(self._by_id(note_id), [("title", title)])
            self.conn.commit()
            return note
        except Exception as e:
            self.conn.rollback()
            logger.error(f"Failed to rename note #{note_id}: {e}")
            raise

    # ── DELETE ────────────────────────────────────────────

    def remove(self, note_id: int) -> Note:
        """Delete a note and return what was deleted."""
        try:
            note = self.db.delete(self._by_id(note_id))
            self.conn.commit()
            logger.info(f"Deleted note #{note_id}")
            return note
        except Exception as e:
            self.conn.rollback()
            logger.error(f"Failed to delete note #{note_id}: {e}")
            raise
