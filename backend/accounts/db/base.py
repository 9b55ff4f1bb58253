"""SQLAlchemy Declarative Bases — one per service database.

Invariants:
    - AuthUser maps onto AuthBase, User onto UserBase
    - Both services name their table "users"; separate metadata lets both
      mappings live in one Python process (tests import both apps)
"""

from sqlalchemy.orm import DeclarativeBase


class AuthBase(DeclarativeBase):
    """Base class for the auth service ORM models."""
    pass


class UserBase(DeclarativeBase):
    """Base class for the user directory ORM models."""
    pass
