"""ORM Models — SQLAlchemy declarative models for both services.

Design Decisions:
    - One file per entity for locality
"""

from accounts.models.auth_user import AuthUser  # noqa: F401
from accounts.models.user import User  # noqa: F401
