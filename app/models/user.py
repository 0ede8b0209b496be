"""ORM model for application users (auth and RBAC)."""

from sqlalchemy import Column, String

from app.core.rbac import UserRole
from app.models.base import Base, RecordMixin


class User(RecordMixin, Base):
    """
    User account for JWT authentication and role-based access control.

    role: 'ADMIN' or 'REGULAR_USER'. email is an exact-match unique key.
    """

    __tablename__ = "users"

    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, default=UserRole.REGULAR_USER.value)
