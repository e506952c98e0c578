"""ORM model for user accounts (credentials and role)."""

from sqlalchemy import Column, Enum, Integer, String
from sqlalchemy.orm import relationship

from electroleed.models.base import Base
from electroleed.models.role import Role


class User(Base):
    """
    User account for token authentication and role-based access control.

    login is unique (enforced by a unique index); role is one of Role.
    Deleting a user removes the linked employee profile.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    login = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(
        Enum(Role, name="user_role", native_enum=False, length=32),
        nullable=False,
        default=Role.PROJECT_MEMBER,
    )

    employee = relationship(
        "Employee",
        back_populates="account",
        uselist=False,
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, login={self.login!r}, role={self.role!r})"
