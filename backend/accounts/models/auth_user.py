"""AuthUser ORM — registered account of the auth service.

Invariants:
    - id is a UUID string generated by the service, not the database
    - password is stored as given (hashing is out of scope)
    - Column names are the lowercase forms Postgres folds unquoted identifiers to
"""

import uuid

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from accounts.db.base import AuthBase


class AuthUser(AuthBase):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4()),
    )
    login: Mapped[str] = mapped_column(Text, nullable=False, default="")
    password: Mapped[str] = mapped_column(Text, nullable=False, default="")
    email: Mapped[str] = mapped_column(Text, nullable=False, default="")
    first_name: Mapped[str] = mapped_column(
        "firstname", Text, nullable=False, default="",
    )
    last_name: Mapped[str] = mapped_column(
        "lastname", Text, nullable=False, default="",
    )
