"""Shared test fixtures: in-memory SQLite database and quick account creation."""

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from electroleed.core.database import enable_sqlite_foreign_keys
from electroleed.core.security import hash_password
from electroleed.models import Base, Role, User

# Low bcrypt cost keeps tests fast; verification is cost-independent.
TEST_BCRYPT_ROUNDS = 4


def make_session_factory(url: str = "sqlite://") -> sessionmaker:
    """Fresh database with all tables; in-memory by default, shared across threads."""
    if url == "sqlite://":
        engine = create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(url, connect_args={"check_same_thread": False})
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(engine)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def add_user(session: Session, login: str, password: str, role: Role) -> User:
    user = User(
        login=login,
        password_hash=hash_password(password, rounds=TEST_BCRYPT_ROUNDS),
        role=role,
    )
    session.add(user)
    session.commit()
    session.refresh(user)
    return user
