import logging

from sqlalchemy import Column, MetaData, String, Table, create_engine, inspect, select, func
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError, NoSuchModuleError, SQLAlchemyError
from sqlalchemy.pool import NullPool

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """The registration database could not be reached or written to"""


def registration_table(name, metadata=None):
    """Two text columns, no key: one row per submitted registration"""
    return Table(
        name,
        metadata if metadata is not None else MetaData(),
        Column('firstname', String(255)),
        Column('email', String(255)),
    )


def get_engine(url):
    """Create an engine that opens a fresh connection on every checkout.

    NullPool closes the DBAPI connection as soon as it is released, so no
    connection outlives the request that opened it.
    """
    try:
        return create_engine(url, poolclass=NullPool)
    except (SQLAlchemyError, ImportError) as e:
        raise StorageError(f"Cannot create engine for {make_url(url).drivername}: {e}") from e


def init_db(engine, table_name):
    """Create the registration table if it does not exist"""
    metadata = MetaData()
    registration_table(table_name, metadata)
    try:
        metadata.create_all(engine)
        logger.info(f"Table {table_name} is ready")
    except SQLAlchemyError as e:
        logger.error(f"Failed to initialize database: {e}")
        raise StorageError(str(e)) from e


def save_registration(engine, table_name, firstname, email):
    """Insert one registration row.

    Values are bound as statement parameters, never spliced into SQL.
    """
    table = registration_table(table_name)
    statement = table.insert().values(firstname=firstname, email=email)

    try:
        with engine.begin() as conn:
            conn.execute(statement)
    except SQLAlchemyError as e:
        raise StorageError(str(e)) from e


def count_registrations(engine, table_name):
    """Return the number of stored rows, or None when the table is missing"""
    try:
        if not inspect(engine).has_table(table_name):
            return None
        table = registration_table(table_name)
        with engine.connect() as conn:
            return conn.execute(select(func.count()).select_from(table)).scalar_one()
    except SQLAlchemyError as e:
        raise StorageError(str(e)) from e


def driver_available(url):
    """Whether the DBAPI module behind the URL's dialect can be imported"""
    try:
        dialect = make_url(url).get_dialect()
        dialect.import_dbapi()
        return True
    except (ImportError, NoSuchModuleError, ArgumentError):
        return False


def driver_name(url):
    try:
        return make_url(url).get_driver_name()
    except ArgumentError:
        return 'unknown'
