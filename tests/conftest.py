import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from courses_api.auth.passwords import hash_password
from courses_api.database import Base
from courses_api.main import create_app
from courses_api.models.course import Course
from courses_api.models.user import User
from courses_api.store import Store

TEST_PASSWORD = 'joepassword'
TEST_BCRYPT_ROUNDS = 4


@pytest.fixture
def db():
    engine = create_engine(
        'sqlite://',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool,
    )
    testing_session_local = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine, tables=[User.__table__, Course.__table__])

    session = testing_session_local()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine, tables=[Course.__table__, User.__table__])


@pytest.fixture
def store(db) -> Store:
    return Store(db)


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr('courses_api.core.config.BCRYPT_ROUNDS', TEST_BCRYPT_ROUNDS)


@pytest.fixture
def make_user(store: Store):
    def _make_user(email: str, password: str = TEST_PASSWORD, first_name: str = 'Joe') -> User:
        return store.create_user(
            first_name=first_name,
            last_name='Smith',
            email_address=email,
            password_hash=hash_password(password, rounds=TEST_BCRYPT_ROUNDS),
        )

    return _make_user


@pytest.fixture
def client():
    app = create_app('sqlite://')
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
