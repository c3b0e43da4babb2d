import pytest

from binmonitor import create_app
from binmonitor.config import TestConfig
from binmonitor.extensions import db


@pytest.fixture()
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


def _stringify(values):
    return {key: str(value) for key, value in values.items()}


def api_get(client, action, **params):
    params['action'] = action
    return client.get('/api', query_string=_stringify(params))


def api_post(client, action, **data):
    data['action'] = action
    return client.post('/api', data=_stringify(data))


@pytest.fixture()
def new_bin(client):
    """Create a bin through the API and return its JSON record."""
    r = api_post(client, 'add_bin')
    assert r.get_json()['success'] is True
    return r.get_json()['newBin']
