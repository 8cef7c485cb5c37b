import os
import json
import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from dotenv import load_dotenv
from sqlalchemy.engine import URL, make_url

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

# Environment variables
DATABASE_URL = os.getenv('DATABASE_URL')
DB_HOST = os.getenv('DB_HOST', 'localhost')
DB_PORT = int(os.getenv('DB_PORT', '3306'))
DB_USER = os.getenv('DB_USER', 'intel')
DB_PASSWORD = os.getenv('DB_PASSWORD', '')
DB_NAME = os.getenv('DB_NAME', 'intel')
DB_DRIVER = os.getenv('DB_DRIVER', 'mysql+pymysql')
DB_TABLE = os.getenv('DB_TABLE', 'data')
DB_SECRET_ID = os.getenv('DB_SECRET_ID')
AWS_REGION = os.getenv('AWS_REGION', 'ap-south-1')

COMPANY_NAME = os.getenv('COMPANY_NAME', 'ABC Company')
HOST = os.getenv('HOST', '0.0.0.0')
PORT = int(os.getenv('PORT', 8080))
HEALTH_URL = os.getenv('HEALTH_URL', f'http://localhost:{PORT}/health')


def load_database_secret(secret_id, client=None):
    """Fetch database credentials from AWS Secrets Manager.

    The secret is expected in the RDS layout (host, port, username,
    password, dbname). Returns an empty dict when the lookup fails.
    """
    if client is None:
        client = boto3.client('secretsmanager', region_name=AWS_REGION)

    try:
        response = client.get_secret_value(SecretId=secret_id)
        secret = json.loads(response['SecretString'])
        logger.info(f"Loaded database credentials from secret {secret_id}")
        return secret
    except (ClientError, BotoCoreError) as e:
        logger.error(f"Failed to load database secret {secret_id}: {e}")
        return {}
    except (KeyError, ValueError) as e:
        logger.error(f"Database secret {secret_id} is not a JSON string: {e}")
        return {}


def database_url(secret_client=None):
    """Build the SQLAlchemy URL for the registration database"""
    if DATABASE_URL:
        return make_url(DATABASE_URL)

    secret = {}
    if DB_SECRET_ID:
        secret = load_database_secret(DB_SECRET_ID, client=secret_client)

    return URL.create(
        DB_DRIVER,
        username=secret.get('username', DB_USER),
        password=secret.get('password', DB_PASSWORD),
        host=secret.get('host', DB_HOST),
        port=int(secret.get('port', DB_PORT)),
        database=secret.get('dbname', DB_NAME),
    )


def safe_url(url):
    """URL text with the password masked, for logs and diagnostics"""
    return make_url(url).render_as_string(hide_password=True)
