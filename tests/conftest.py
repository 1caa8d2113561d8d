import pytest

from portfolio_hub import create_app
from portfolio_hub.config import TestConfig
from portfolio_hub.extensions import db
from portfolio_hub.models import Post


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


@pytest.fixture()
def admin_client(client):
    r = client.post('/login', data={'password': TestConfig.ADMIN_PASSWORD})
    assert r.status_code == 302
    return client


@pytest.fixture()
def guest_client(client):
    r = client.post('/guest')
    assert r.status_code == 302
    return client


@pytest.fixture()
def sample_post(app):
    post = Post(title='Sample', summary='sum', content='body', link_url='http://example.com')
    db.session.add(post)
    db.session.commit()
    return post.id
