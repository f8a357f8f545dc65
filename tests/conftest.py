"""
Shared fixtures: an in-memory SQLite database per test, a TestClient wired to
it, and the common users, tokens and car.
"""
import os
import tempfile

# Configure before anything imports app.core.config
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENABLE_SCHEDULER"] = "false"
os.environ["LOG_FILE"] = ""
os.environ["AWS_ACCESS_KEY_ID"] = ""
os.environ["AWS_SECRET_ACCESS_KEY"] = ""
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="carrental-uploads-")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.dialects import postgresql
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.session import Base, get_db
from app.db.models import UserRole
from factories import make_user, make_car, auth_headers
from app.main import app


@pytest.fixture
def engine():
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def row_locks(session_factory):
    """
    Models whose rows a session query locked with SELECT ... FOR UPDATE

    SQLite drops the clause, so each select is compiled for PostgreSQL.
    """
    locked = []

    def capture(state):
        if not state.is_select or state.is_relationship_load or state.is_column_load:
            return
        sql = str(state.statement.compile(dialect=postgresql.dialect()))
        if "FOR UPDATE" in sql:
            locked.append(state.bind_mapper.class_)

    event.listen(session_factory, "do_orm_execute", capture)
    yield locked
    event.remove(session_factory, "do_orm_execute", capture)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    # Not used as a context manager so startup hooks (init_db, scheduler) stay off
    test_client = TestClient(app)
    yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def user(db):
    return make_user(db)


@pytest.fixture
def admin(db):
    return make_user(db, username="boss", role=UserRole.ADMIN)


@pytest.fixture
def user_headers(user):
    return auth_headers(user)


@pytest.fixture
def admin_headers(admin):
    return auth_headers(admin)


@pytest.fixture
def car(db):
    return make_car(db)
