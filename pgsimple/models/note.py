"""
pgsimple/models/note.py
-----------------------
Example entity: a note with a title and some content.
"""

from dataclasses import dataclass
from typing import Optional

from pgsimple.models.schema import Field, Schema


@dataclass
class Note:
    """
    A single note.

    Attributes:
        title: Short heading.
        content: Body text.
        id: Database primary key (None for new records).
    """
    title: str
    content: str
    id: Optional[int] = None

    def __str__(self) -> str:
        return f"#{self.id} {self.title}"


def decode_note(row: dict) -> Note:
    """Convert a ``notes`` row into a Note."""
    return Note(id=int(row["id"]), title=row["title"], content=row["content"])


NOTES: Schema[Note] = Schema(
    table="notes",
    primary_key="id",
    fields=[
        Field.integer("id"),
        Field.string("title"),
        Field.string("content"),
    ],
    decoder=decode_note,
)
