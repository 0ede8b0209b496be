"""User directory: lookups and writes against the users table. No uniqueness checks here."""

from sqlalchemy.orm import Session

from app.core.rbac import UserRole
from app.models import User


def find_by_email(session: Session, email: str) -> User | None:
    """Exact, case-sensitive match on email."""
    return session.query(User).filter(User.email == email).first()


def find_by_id(session: Session, user_id: str) -> User | None:
    return session.get(User, user_id)


def create_user(
    session: Session,
    first_name: str,
    last_name: str,
    email: str,
    password_hash: str,
    role: UserRole | None = None,
) -> User:
    """
    Insert a user and flush so the id is assigned.

    Raises sqlalchemy.exc.IntegrityError when the email is already taken.
    """
    user = User(
        first_name=first_name,
        last_name=last_name,
        email=email,
        password_hash=password_hash,
        role=(role or UserRole.REGULAR_USER).value,
    )
    session.add(user)
    session.flush()
    return user


def set_role(session: Session, user_id: str, role: UserRole) -> User | None:
    """Update a user's role; returns the updated user, or None if the id does not resolve."""
    user = session.get(User, user_id)
    if user is None:
        return None
    user.role = UserRole(role).value
    session.flush()
    return user
