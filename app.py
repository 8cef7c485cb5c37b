import logging

import click
from flask import Flask, request, make_response

import config
import pages
import registrations
from storage import StorageError, driver_available, driver_name, get_engine, init_db

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

HEALTH_PATH_MARKER = '/health'


def is_health_request():
    """Health probes carry a ?health flag or have /health in the path"""
    return 'health' in request.args or HEALTH_PATH_MARKER in request.path


def create_app(database_url=None, table_name=None):
    app = Flask(__name__)
    app.config['DATABASE_URL'] = database_url or config.database_url()
    app.config['DB_TABLE'] = table_name or config.DB_TABLE
    app.config['COMPANY_NAME'] = config.COMPANY_NAME

    # Building the engine does not connect; NullPool connects per checkout.
    try:
        app.extensions['registration_engine'] = get_engine(app.config['DATABASE_URL'])
    except StorageError as e:
        logger.error(f"Database engine unavailable: {e}")
        app.extensions['registration_engine'] = None

    def app_engine():
        """Engine for this app; raises StorageError when it could not be built"""
        engine = app.extensions['registration_engine']
        if engine is None:
            return get_engine(app.config['DATABASE_URL'])
        return engine

    @app.before_request
    def health_check():
        """Answer load balancer probes before any other handling"""
        if is_health_request():
            response = make_response('OK', 200)
            response.mimetype = 'text/plain'
            return response

    @app.route('/', defaults={'path': ''}, methods=['GET', 'POST'])
    @app.route('/<path:path>', methods=['GET', 'POST'])
    def index(path):
        """Registration form; a POST submits it"""
        url = app.config['DATABASE_URL']
        result = None
        if request.method == 'POST':
            result = registrations.process_registration(
                request.form, app_engine, app.config['DB_TABLE'])

        return pages.render_page(
            app.config['COMPANY_NAME'],
            driver_name(url),
            driver_available(url),
            request.environ.get('SERVER_SOFTWARE', 'Werkzeug'),
            result=result,
        )

    @app.cli.command('init-db')
    def init_db_command():
        """Create the registration table."""
        try:
            init_db(app_engine(), app.config['DB_TABLE'])
        except StorageError as e:
            raise click.ClickException(str(e))
        click.echo(f"Initialized table {app.config['DB_TABLE']} at {config.safe_url(app.config['DATABASE_URL'])}")

    logger.info(f"Registration app using {config.safe_url(app.config['DATABASE_URL'])}")
    return app


app = create_app()

if __name__ == '__main__':
    app.run(host=config.HOST, port=config.PORT, debug=False)
