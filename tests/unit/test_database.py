"""
Tests for the Database facade.
"""
import psycopg2
import pytest

from pgsimple.db.database import Database
from pgsimple.errors import UnexpectedResultType
from pgsimple.models.note import Note
from pgsimple.query.builder import Query

ROW = {"id": 1, "title": "Hello", "content": "World"}


def _query(schema):
    return Query.from_(schema).selecting(["*"]).filtered([("id = $1", [1])])


def test_all_returns_every_decoded_row(notes_schema, fake_connection):
    conn, cur = fake_connection(rows=[ROW, {**ROW, "id": 2}])
    notes = Database(conn).all(_query(notes_schema))
    assert [n.id for n in notes] == [1, 2]
    cur.execute.assert_called_once_with("SELECT * FROM notes WHERE id = %(p1)s", {"p1": 1})


def test_one_returns_first_row(notes_schema, fake_connection):
    conn, _ = fake_connection(rows=[ROW, {**ROW, "id": 2}])
    assert Database(conn).one(_query(notes_schema)) == Note("Hello", "World", 1)


def test_one_with_no_rows_returns_none(notes_schema, fake_connection):
    conn, _ = fake_connection(rows=[])
    assert Database(conn).one(_query(notes_schema)) is None


def test_one_raises_on_driver_failure(notes_schema, fake_connection):
    conn, _ = fake_connection(error=psycopg2.ProgrammingError("bad column"))
    with pytest.raises(psycopg2.ProgrammingError):
        Database(conn).one(_query(notes_schema))


def test_insert_binds_values_in_field_order(notes_schema, fake_connection):
    conn, cur = fake_connection(rows=[ROW])
    note = Database(conn).insert(notes_schema, ["Hello", "World"])
    assert note.id == 1
    cur.execute.assert_called_once_with(
        "INSERT INTO notes(title, content) VALUES (%(p1)s, %(p2)s) RETURNING *",
        {"p1": "Hello", "p2": "World"},
    )


def test_insert_with_no_returned_row_is_unexpected(notes_schema, fake_connection):
    conn, _ = fake_connection(rows=[])
    with pytest.raises(UnexpectedResultType):
        Database(conn).insert(notes_schema, ["a", "b"])


def test_insert_propagates_constraint_violation(notes_schema, fake_connection):
    conn, _ = fake_connection(error=psycopg2.IntegrityError("duplicate key"))
    with pytest.raises(psycopg2.IntegrityError):
        Database(conn).insert(notes_schema, ["a", "b"])


def test_update_appends_set_values_after_where_bindings(notes_schema, fake_connection):
    conn, cur = fake_connection(rows=[{**ROW, "title": "New"}])
    query = Query.from_(notes_schema).filtered([("id = $1", [1])])
    note = Database(conn).update(query, [("title", "New")])
    assert note.title == "New"
    cur.execute.assert_called_once_with(
        "UPDATE notes SET title = %(p2)s WHERE id = %(p1)s RETURNING *",
        {"p1": 1, "p2": "New"},
    )


def test_update_with_no_match_is_unexpected(notes_schema, fake_connection):
    conn, _ = fake_connection(rows=[])
    with pytest.raises(UnexpectedResultType) as exc_info:
        Database(conn).update(Query.from_(notes_schema), [("title", "x")])
    assert exc_info.value.got == "no rows"


def test_delete_returns_first_deleted_row(notes_schema, fake_connection):
    conn, cur = fake_connection(rows=[ROW])
    note = Database(conn).delete(Query.from_(notes_schema).filtered([("id = $1", [1])]))
    assert note.id == 1
    cur.execute.assert_called_once_with(
        "DELETE FROM notes WHERE id = %(p1)s RETURNING *", {"p1": 1}
    )


def test_delete_with_no_match_is_unexpected(notes_schema, fake_connection):
    conn, _ = fake_connection(rows=[])
    with pytest.raises(UnexpectedResultType):
        Database(conn).delete(Query.from_(notes_schema))


def test_facade_leaves_connection_alone(notes_schema, fake_connection):
    conn, _ = fake_connection(rows=[ROW])
    Database(conn).insert(notes_schema, ["Hello", "World"])
    conn.commit.assert_not_called()
    conn.close.assert_not_called()
