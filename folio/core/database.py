import os
import sqlite3
import uuid
from contextlib import contextmanager
from datetime import datetime, timezone

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import MetaData, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError

from .config import Config
from .errors import Conflict, NotFound

# Predictable constraint names across SQLite and PostgreSQL
convention = {
    "ix": 'ix_%(column_0_label)s',
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s"
}

db = SQLAlchemy(metadata=MetaData(naming_convention=convention))

PG_UNIQUE_VIOLATION = '23505'
SQLITE_UNIQUE_CODES = {
    sqlite3.SQLITE_CONSTRAINT_UNIQUE,
    sqlite3.SQLITE_CONSTRAINT_PRIMARYKEY,
}


@event.listens_for(Engine, 'connect')
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores ON DELETE CASCADE unless this is set per connection
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute('PRAGMA foreign_keys=ON')
        cursor.close()


def generate_id():
    return uuid.uuid4().hex


def utcnow():
    """Naive UTC timestamp, comparable with values read back from SQLite."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def isoformat(value):
    return value.isoformat() if value else None


class TimestampMixin:
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    def touch(self):
        self.updated_at = utcnow()


class PublishableMixin:
    published_at = db.Column(db.DateTime)

    def stamp_published(self):
        """First publish sets published_at; unpublishing never clears it."""
        if self.published and self.published_at is None:
            self.published_at = utcnow()


def is_unique_violation(error):
    """
    Classify an IntegrityError by the driver's structured error code.
    psycopg2 exposes `pgcode`, psycopg 3 `sqlstate`, sqlite3 `sqlite_errorcode`.
    """
    orig = getattr(error, 'orig', error)
    sqlstate = getattr(orig, 'pgcode', None) or getattr(orig, 'sqlstate', None)
    if sqlstate == PG_UNIQUE_VIOLATION:
        return True
    return getattr(orig, 'sqlite_errorcode', None) in SQLITE_UNIQUE_CODES


@contextmanager
def transaction(conflict_message=None):
    """
    Unit of work around db.session. Everything written inside the block is
    committed together; a unique violation is reported as Conflict.
    """
    try:
        yield db.session
        db.session.commit()
    except IntegrityError as e:
        db.session.rollback()
        if is_unique_violation(e):
            raise Conflict(conflict_message) from e
        raise
    except Exception:
        db.session.rollback()
        raise


class Database:

    @staticmethod
    def init_app(app):
        """Bind the shared SQLAlchemy object to the app and create tables."""
        db_dir = app.config.get('DB_DIR', Config.DB_DIR)
        uri = app.config.get('SQLALCHEMY_DATABASE_URI') or Config.database_uri(
            db_dir=db_dir, database_url=app.config.get('DATABASE_URL')
        )
        app.config['SQLALCHEMY_DATABASE_URI'] = uri
        app.config.setdefault('SQLALCHEMY_TRACK_MODIFICATIONS', False)

        if uri.startswith('sqlite:///') and db_dir:
            os.makedirs(db_dir, exist_ok=True)

        db.init_app(app)

        with app.app_context():
            Database.create_all()

    @staticmethod
    def create_all():
        # Importing the models registers them on db.metadata
        from ..modules import models  # noqa: F401
        db.create_all()

    @staticmethod
    def ping():
        """Return True when the database answers a trivial query."""
        try:
            db.session.execute(text('SELECT 1'))
            return True
        except Exception:
            db.session.rollback()
            return False


def get_or_404(model, ident, message=None):
    entity = db.session.get(model, ident)
    if entity is None:
        raise NotFound(message)
    return entity


def apply_changes(entity, changes):
    """Partial update: only supplied fields change, updated_at always moves."""
    for name, value in changes.items():
        setattr(entity, name, value)
    entity.touch()
    return entity
