"""Registration handling independent of HTTP and HTML.

A submission is cleaned, validated, then written with a single insert.
The outcome is one of SUCCESS, INVALID or UNAVAILABLE; callers decide how
to present it.
"""
import logging

from storage import StorageError, save_registration

logger = logging.getLogger(__name__)

SUCCESS = 'success'
INVALID = 'invalid'
UNAVAILABLE = 'unavailable'


def clean_registration(form):
    """Return the trimmed (firstname, email) pair from submitted form data"""
    firstname = form.get('firstname')
    if firstname is None:
        firstname = form.get('full_name', '')
    email = form.get('email', '')
    return (firstname or '').strip(), (email or '').strip()


def process_registration(form, get_engine, table_name):
    """Validate and persist one registration.

    get_engine is called only once the input is valid, so invalid
    submissions never touch the database. Backend faults are logged and
    reported as UNAVAILABLE without their detail.
    """
    firstname, email = clean_registration(form)
    result = {'firstname': firstname, 'email': email}

    if not firstname or not email:
        result['status'] = INVALID
        return result

    try:
        engine = get_engine()
        save_registration(engine, table_name, firstname, email)
    except StorageError as e:
        logger.error(f"Database error: {e}")
        result['status'] = UNAVAILABLE
        return result

    logger.info(f"Registration saved to {table_name}")
    result['status'] = SUCCESS
    return result
