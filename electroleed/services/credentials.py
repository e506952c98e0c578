"""Credential store: user accounts looked up and persisted through one DB session."""

import logging
from typing import Literal

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from electroleed.core.errors import DuplicateLogin, NotFound
from electroleed.core.security import hash_password
from electroleed.models import Role, User

logger = logging.getLogger(__name__)

SortField = Literal["login", "role"]
SortOrder = Literal["asc", "desc"]


def _escape_like(value: str) -> str:
    """Make % and _ in a search keyword match literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class CredentialStore:
    """
    Lookup, creation, update and removal of user accounts.

    Login uniqueness is enforced by the unique index on users.login; the
    existence check only gives an early, friendlier failure.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_by_login(self, login: str) -> User | None:
        return self.session.query(User).filter(User.login == login).first()

    def find_by_id(self, user_id: int) -> User | None:
        return self.session.get(User, user_id)

    def exists_by_login(self, login: str) -> bool:
        return (
            self.session.query(User.id).filter(User.login == login).first() is not None
        )

    def save(self, user: User) -> User:
        """Insert a new account. Raises DuplicateLogin if the login is taken."""
        if self.exists_by_login(user.login):
            raise DuplicateLogin()
        self.session.add(user)
        self._commit_unique(user.login)
        self.session.refresh(user)
        logger.info("User created", extra={"login": user.login, "role": user.role.value})
        return user

    def create(self, login: str, password: str, role: Role) -> User:
        """Hash the password and store a new account."""
        return self.save(User(login=login, password_hash=hash_password(password), role=role))

    def update(
        self,
        user_id: int,
        *,
        login: str | None = None,
        password: str | None = None,
        role: Role | None = None,
    ) -> User:
        """Change login, password and/or role of an existing account."""
        user = self.find_by_id(user_id)
        if user is None:
            raise NotFound(f"Пользователь с заданным Id не найден {user_id}")
        if login is not None and login != user.login:
            if self.exists_by_login(login):
                raise DuplicateLogin()
            user.login = login
        if password is not None:
            user.password_hash = hash_password(password)
        if role is not None:
            user.role = role
        self._commit_unique(user.login)
        self.session.refresh(user)
        return user

    def delete(self, login: str) -> None:
        """Remove an account and its employee profile. Raises NotFound if absent."""
        user = self.find_by_login(login)
        if user is None:
            raise NotFound(f"Пользователь с login {login} не найден")
        self.session.delete(user)
        self.session.commit()
        logger.info("User deleted", extra={"login": login})

    def list_users(
        self,
        keyword: str | None = None,
        sort: SortField | None = None,
        order: SortOrder = "asc",
    ) -> list[User]:
        """
        List accounts, optionally filtered and sorted.

        keyword matches a substring of the login or of the role name
        (case-insensitive). Without a sort field, users are ordered by id.
        """
        query = self.session.query(User)
        if keyword:
            roles = [r for r in Role if keyword.lower() in r.value.lower()]
            conditions = [User.login.ilike(f"%{_escape_like(keyword)}%", escape="\\")]
            if roles:
                conditions.append(User.role.in_(roles))
            query = query.filter(or_(*conditions))
        if sort in ("login", "role"):
            column = User.login if sort == "login" else User.role
            query = query.order_by(column.desc() if order == "desc" else column.asc())
        else:
            query = query.order_by(User.id)
        return query.all()

    def _commit_unique(self, login: str) -> None:
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            logger.info("Duplicate login rejected by unique constraint", extra={"login": login})
            raise DuplicateLogin(cause=e) from e
