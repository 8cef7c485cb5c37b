import pytest
from sqlalchemy import create_engine, event, text

from app import create_app
from storage import get_engine, init_db

TABLE = 'data'


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite:///{tmp_path / 'registrations.db'}"


@pytest.fixture
def engine(db_url):
    engine = get_engine(db_url)
    init_db(engine, TABLE)
    return engine


@pytest.fixture
def app(db_url, engine):
    app = create_app(database_url=db_url, table_name=TABLE)
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def fetch_rows(db_url):
    """Read back stored registrations as (firstname, email) tuples"""
    def fetch():
        reader = create_engine(db_url)
        try:
            with reader.connect() as conn:
                return [tuple(row) for row in conn.execute(text(f'SELECT firstname, email FROM {TABLE}'))]
        finally:
            reader.dispose()
    return fetch


@pytest.fixture
def connection_events(app):
    """Count DBAPI connections opened and closed by the app's engine"""
    counts = {'opened': 0, 'closed': 0}
    engine = app.extensions['registration_engine']

    def on_connect(dbapi_connection, connection_record):
        counts['opened'] += 1

    def on_close(dbapi_connection, connection_record):
        counts['closed'] += 1

    event.listen(engine, 'connect', on_connect)
    event.listen(engine, 'close', on_close)
    return counts
