import contextlib

import pytest

from lightbnb_db.config import LightBnBDBConfig
from lightbnb_db.core import LightBnBDB
from lightbnb_db.db import DBPool, SQLiteBackend


USERS = [
    (1, "Tristan Jacobs", "tristanjacobs@gmail.com", "password"),
    (2, "Eva Stanley", "sebastianguerra@ymail.com", "password"),
    (3, "Mariah Nolan", "mariahnolan@gmail.com", "password"),
]

# cost_per_night is in cents
PROPERTIES = [
    (1, 1, "Speed lamp", "Vancouver", 9300),
    (2, 1, "Blank corner", "North Vancouver", 15000),
    (3, 2, "Habit mix", "Calgary", 4000),
    (4, 2, "Headed know", "Toronto", 20000),
]

RESERVATIONS = [
    (1, "2018-09-11", "2018-09-26", 1, 3),
    (2, "2019-01-04", "2019-02-01", 3, 3),
    (3, "2021-10-01", "2021-10-14", 2, 2),
    (4, "2023-03-05", "2023-03-10", 2, 3),
]

# (guest_id, property_id, reservation_id, rating)
REVIEWS = [
    (3, 1, 1, 5),
    (3, 1, 1, 4),
    (2, 2, 3, 3),
    (3, 3, 2, 2),
]


def _seed(conn):
    conn.executemany(
        "INSERT INTO users (id, name, email, password) VALUES (?, ?, ?, ?)",
        USERS,
    )
    conn.executemany(
        """
        INSERT INTO properties (
            id, owner_id, title, city, cost_per_night,
            thumbnail_photo_url, cover_photo_url, country, street, province, post_code
        )
        VALUES (?, ?, ?, ?, ?, 'thumb.jpg', 'cover.jpg', 'Canada', '1 Main St', 'BC', 'V0V 0V0')
        """,
        PROPERTIES,
    )
    conn.executemany(
        "INSERT INTO reservations (id, start_date, end_date, property_id, guest_id) "
        "VALUES (?, ?, ?, ?, ?)",
        RESERVATIONS,
    )
    conn.executemany(
        "INSERT INTO property_reviews (guest_id, property_id, reservation_id, rating) "
        "VALUES (?, ?, ?, ?)",
        REVIEWS,
    )
    conn.commit()


@pytest.fixture
def sqlite_backend(tmp_path):
    return SQLiteBackend(str(tmp_path / "lightbnb.db"))


@pytest.fixture
def pool(sqlite_backend):
    """Pool over a freshly created and seeded SQLite database."""
    pool = DBPool(sqlite_backend)
    with pool.connection() as conn:
        sqlite_backend.init_schema(conn.raw)
        _seed(conn.raw)
    return pool


@pytest.fixture
def db(pool):
    return LightBnBDB.from_pool(pool, config=LightBnBDBConfig(db_uri=str(pool.backend.path)))


class RecordingConnection:
    def __init__(self, rows):
        self.rows = rows
        self.calls = []
        self.committed = False

    def fetch_all(self, query, params=None):
        self.calls.append((query, list(params or [])))
        return list(self.rows)

    def fetch_one(self, query, params=None):
        self.calls.append((query, list(params or [])))
        return self.rows[0] if self.rows else None

    def commit(self):
        self.committed = True


class RecordingPool:
    """
    Stand-in for DBPool that records every (query, params) pair it is
    handed and answers with canned rows.
    """

    def __init__(self, rows=None, paramstyle="dollar", ilike="ILIKE"):
        self.paramstyle = paramstyle
        self.ilike = ilike
        self.conn = RecordingConnection(rows or [])

    @contextlib.contextmanager
    def connection(self):
        yield self.conn

    @property
    def calls(self):
        return self.conn.calls


@pytest.fixture
def recording_pool():
    return RecordingPool()
