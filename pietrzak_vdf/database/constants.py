import os

from dotenv import load_dotenv
from sqlalchemy.engine import URL, make_url

load_dotenv()


DATABASE_TYPE = os.getenv("DATABASE_TYPE", "sqlite")  # sqlite or postgresql
DATABASE_NAME = os.getenv("DATABASE_NAME", "vdf.db")
DATABASE_USER = os.getenv("DATABASE_USER")
DATABASE_PASSWORD = os.getenv("DATABASE_PASSWORD")
DATABASE_HOST = os.getenv("DATABASE_HOST", "localhost")
DATABASE_PORT = int(os.getenv("DATABASE_PORT", "5432"))  # default port for PostgreSQL


def build_database_url() -> URL:
    """
    Build the SQLAlchemy URL of the solution store.

    A complete DATABASE_URL in the environment wins over the individual
    DATABASE_* settings.
    """
    url = os.getenv("DATABASE_URL")
    if url:
        return make_url(url)

    if DATABASE_TYPE == "sqlite":
        return URL.create("sqlite", database=DATABASE_NAME)
    # URL.create escapes special characters in the credentials
    return URL.create(
        "postgresql+psycopg2",
        username=DATABASE_USER,
        password=DATABASE_PASSWORD,
        host=DATABASE_HOST,
        port=DATABASE_PORT,
        database=DATABASE_NAME,
    )


DATABASE_URL = build_database_url()
