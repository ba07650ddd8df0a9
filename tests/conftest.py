"""
Pytest configuration shared by the unit tests.

Puts the repository root on sys.path so ``import pgsimple`` works without
an install, and provides a MagicMock psycopg2 connection so no database
is needed.
"""

import os
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest


def _ensure_repo_root_on_sys_path() -> None:
    repo_root = str(Path(__file__).resolve().parents[1])
    if repo_root not in sys.path:
        sys.path.insert(0, repo_root)


_ensure_repo_root_on_sys_path()

os.environ.setdefault("PGSIMPLE_LOG_LEVEL", "DEBUG")


def make_connection(rows=None, description=("column",), error=None):
    """
    Build a fake psycopg2 connection.

    Args:
        rows: Rows returned by ``fetchall``.
        description: ``cursor.description``; None means no result set.
        error: Exception raised by ``cursor.execute``.
    """
    cur = MagicMock()
    cur.description = description
    cur.fetchall.return_value = list(rows or [])
    if error is not None:
        cur.execute.side_effect = error
    conn = MagicMock()
    conn.cursor.return_value.__enter__.return_value = cur
    return conn, cur


@pytest.fixture
def notes_schema():
    from pgsimple.models.note import NOTES
    return NOTES


@pytest.fixture
def fake_connection():
    return make_connection
