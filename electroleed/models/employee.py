"""ORM model for the employee profile owned by a user account."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from electroleed.models.base import Base


class Employee(Base):
    """Employee profile linked 1:1 to a user account; removed with the account."""

    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, autoincrement=True)
    full_name = Column(String(255), nullable=False)
    position = Column(String(255), nullable=False, default="")
    account_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=True,
        unique=True,
    )

    account = relationship("User", back_populates="employee")
