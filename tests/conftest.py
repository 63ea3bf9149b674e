"""
Shared fixtures: a fresh app on a temporary SQLite database per test,
two users, and a helper that signs the test client in as one of them.
"""

import os
import shutil
import tempfile

import pytest
from flask import Flask

from folio import Folio
from folio.core.database import db
from folio.modules.auth.models import User


@pytest.fixture
def tmp_db_dir():
    """Create a temporary directory for test databases, cleaned up after."""
    d = tempfile.mkdtemp(prefix="folio-test-")
    yield d
    shutil.rmtree(d, ignore_errors=True)


def _make_app(db_dir, **config):
    app = Flask(__name__)
    app.config["TESTING"] = True
    app.config["SECRET_KEY"] = "test-secret"
    app.config["DB_DIR"] = db_dir
    app.config["SQLALCHEMY_DATABASE_URI"] = "sqlite:///" + os.path.join(db_dir, "folio.db")
    app.config["EMAIL_PROVIDER"] = "log"
    Folio(app, config)
    return app


@pytest.fixture
def app(tmp_db_dir):
    """Fully initialised Flask app with every Folio module registered."""
    return _make_app(tmp_db_dir)


@pytest.fixture
def app_factory(tmp_db_dir):
    """Build an app with extra Folio config, e.g. app_factory(FOLIO_EXPOSE_ERRORS=True)."""
    def _factory(**config):
        return _make_app(tmp_db_dir, **config)
    return _factory


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def users(app):
    """Ids of two authors, alice and bob."""
    with app.app_context():
        alice = User(email="alice@example.com", name="Alice")
        bob = User(email="bob@example.com", name="Bob")
        db.session.add_all([alice, bob])
        db.session.commit()
        return {"alice": alice.id, "bob": bob.id}


@pytest.fixture
def login(client):
    """login(user_id) signs the client in; login(None) signs it out."""
    def _login(user_id):
        with client.session_transaction() as sess:
            if user_id is None:
                sess.pop("user_id", None)
            else:
                sess["user_id"] = user_id
    return _login
