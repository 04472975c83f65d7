import os
from contextlib import contextmanager
from typing import Iterator

import psycopg
from dotenv import load_dotenv

load_dotenv()

CONNECTION_SETTINGS = ("POSTGRES_USER", "POSTGRES_PASSWORD", "POSTGRES_DB", "POSTGRES_HOST", "POSTGRES_PORT")


def database_url(driver: str = "postgresql") -> str:
    """Build the dictionary store URL from POSTGRES_* settings."""
    missing = [key for key in CONNECTION_SETTINGS if not os.environ.get(key)]
    if missing:
        raise RuntimeError(f"{', '.join(missing)} must be set to reach the dictionary store")

    return "{driver}://{user}:{pwd}@{host}:{port}/{db}".format(
        driver=driver,
        user=os.environ["POSTGRES_USER"],
        pwd=os.environ["POSTGRES_PASSWORD"],
        db=os.environ["POSTGRES_DB"],
        host=os.environ["POSTGRES_HOST"],
        port=os.environ["POSTGRES_PORT"],
    )


def sqlalchemy_url() -> str:
    return database_url("postgresql+psycopg")


@contextmanager
def get_conn() -> Iterator[psycopg.Connection]:
    """Yield a connection that commits on success and rolls back on error."""
    with psycopg.connect(database_url()) as conn:
        yield conn
