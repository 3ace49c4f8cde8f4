import logging
from typing import Any

from sqlalchemy import create_engine, Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from .constants import DATABASE_URL

logger = logging.getLogger(__name__)

# Global variable to hold the singleton engine
_engine = None


def get_engine() -> Engine:
    """
    Creates and returns a singleton SQLAlchemy engine connected to the database specified by DATABASE_URL.

    :return: SQLAlchemy Engine instance.
    :rtype: sqlalchemy.engine.Engine
    """
    global _engine
    if _engine is None:
        _engine = create_engine(DATABASE_URL)
    return _engine


Base = declarative_base()  # Single instance of Base


def get_orm_base():
    return Base


def initialize_database() -> None:
    """Create all tables defined by the ORM models."""
    Base.metadata.create_all(get_engine())


def save_instance(instance: Any) -> None:
    """
    Save an instance of an ORM model to the database.

    :param instance: The ORM model instance to save.
    """
    Session = sessionmaker(bind=get_engine(), expire_on_commit=False)
    session = Session()

    try:
        session.add(instance)
        session.commit()
    except Exception:
        session.rollback()
        logger.exception("Failed to save %r", instance)
        raise
    finally:
        session.close()


def update_instance(instance: Any) -> None:
    """
    Update an instance of an ORM model in the database.

    :param instance: The ORM model instance to update.
    """
    Session = sessionmaker(bind=get_engine(), expire_on_commit=False)
    session = Session()

    try:
        session.merge(instance)
        session.commit()
    except Exception:
        session.rollback()
        logger.exception("Failed to update %r", instance)
        raise
    finally:
        session.close()
