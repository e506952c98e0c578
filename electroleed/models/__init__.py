"""SQLAlchemy ORM models."""

from electroleed.models.base import Base
from electroleed.models.employee import Employee
from electroleed.models.role import Role
from electroleed.models.user import User

__all__ = ["Base", "Employee", "Role", "User"]
