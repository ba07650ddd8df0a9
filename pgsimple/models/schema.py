"""
pgsimple/models/schema.py
-------------------------
Declarative description of a database table.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class FieldType(Enum):
    """Column type tag. Informational only, values are never validated against it."""

    INTEGER = "integer"
    STRING = "string"


@dataclass(frozen=True)
class Field:
    """
    A single column of a table.

    Attributes:
        name: Column name as it appears in SQL.
        type: Type tag for the column.
    """
    name: str
    type: FieldType

    @classmethod
    def integer(cls, name: str) -> "Field":
        return cls(name, FieldType.INTEGER)

    @classmethod
    def string(cls, name: str) -> "Field":
        return cls(name, FieldType.STRING)


@dataclass(frozen=True)
class Schema(Generic[T]):
    """
    Static description of a table and how to decode its rows.

    Attributes:
        table: Table name. Trusted literal, interpolated into SQL as-is.
        primary_key: Name of the primary key column.
        fields: Columns in declaration order. Order drives INSERT placeholders.
        decoder: Turns a row (dict keyed by column name) into a ``T``.
    """
    table: str
    primary_key: str
    fields: tuple[Field, ...]
    decoder: Callable[[dict], T]

    def __post_init__(self):
        # Stored as a tuple whatever sequence was passed in.
        object.__setattr__(self, "fields", tuple(self.fields))

    @property
    def field_names(self) -> list[str]:
        return [f.name for f in self.fields]

    @property
    def insertable_fields(self) -> list[Field]:
        """Every field except the primary key, in declaration order."""
        return [f for f in self.fields if f.name != self.primary_key]
