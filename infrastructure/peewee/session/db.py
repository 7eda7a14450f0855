from peewee import Database, DatabaseProxy
from playhouse.db_url import connect

# Bound to a real database by init_database() once the URL is known.
db = DatabaseProxy()


def _is_sqlite_memory(database_url: str) -> bool:
    return database_url.startswith("sqlite") and ":memory:" in database_url


def init_database(database_url: str) -> Database:
    """
    Connects to `database_url` (e.g. sqlite:///tasks.db, postgresql://...)
    and binds it to the models.

    An in-memory SQLite database only exists inside its connection, so it
    gets one connection shared by every request thread instead of peewee's
    default connection per thread.
    """
    if _is_sqlite_memory(database_url):
        database = connect(database_url, thread_safe=False, check_same_thread=False)
    else:
        database = connect(database_url)
    db.initialize(database)
    return database
