from flask import Flask

import pages
import registrations


def test_render_page_outside_request():
    app = Flask(__name__)
    with app.app_context():
        body = pages.render_page('ABC Company', 'pymysql', False, 'gunicorn/21.2.0')

    assert 'ABC Company Registration' in body
    assert '<strong>Server Software:</strong> gunicorn/21.2.0' in body
    assert 'Database Driver (pymysql):</strong> ❌ Missing' in body
    assert 'Database Integration: Error' in body


def test_build_alert_levels():
    assert pages.build_alert(None) is None
    for status, level in [
        (registrations.SUCCESS, 'success'),
        (registrations.UNAVAILABLE, 'warning'),
        (registrations.INVALID, 'danger'),
    ]:
        alert = pages.build_alert({'status': status, 'firstname': 'Ada', 'email': 'ada@example.com'})
        assert alert['level'] == level


def test_server_software_reaches_page(client):
    response = client.get('/', environ_base={'SERVER_SOFTWARE': 'gunicorn/21.2.0'})
    assert b'<strong>Server Software:</strong> gunicorn/21.2.0' in response.data
