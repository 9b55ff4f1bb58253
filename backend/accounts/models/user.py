"""User ORM — entry of the user directory service.

Invariants:
    - id is assigned by the database (serial / autoincrement)
    - Column names are the lowercase forms Postgres folds unquoted identifiers to
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from accounts.db.base import UserBase


class User(UserBase):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    username: Mapped[str] = mapped_column(Text, nullable=False, default="")
    first_name: Mapped[str] = mapped_column(
        "firstname", Text, nullable=False, default="",
    )
    last_name: Mapped[str] = mapped_column(
        "lastname", Text, nullable=False, default="",
    )
    email: Mapped[str] = mapped_column(Text, nullable=False, default="")
    phone: Mapped[str] = mapped_column(Text, nullable=False, default="")
