import pytest

from app import create_app
from config import Config


@pytest.fixture
def make_app(tmp_path):
    public = tmp_path / 'public'
    public.mkdir()
    (public / 'index.html').write_text('<h1>Video Portal</h1>')

    def factory(**overrides):
        attrs = {
            'TESTING': True,
            'SECRET_KEY': 'test-secret',
            'UPLOAD_FOLDER': str(tmp_path / 'uploads'),
            'PUBLIC_FOLDER': str(public),
        }
        attrs.update(overrides)
        return create_app(type('TestConfig', (Config,), attrs))

    return factory


@pytest.fixture
def app(make_app):
    return make_app()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin(app):
    c = app.test_client()
    resp = c.post('/api/login', json={'username': 'admin', 'password': 'adminpass'})
    assert resp.status_code == 200
    return c
