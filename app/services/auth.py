"""Auth flow: sign-up, sign-in and role change, each returning a ClientResponse envelope."""

import logging
from typing import TYPE_CHECKING

from sqlalchemy.exc import IntegrityError

from app.core.config import get_settings
from app.core.database import SessionFactory, transaction
from app.core.exceptions import ControlledError
from app.core.rbac import Action, UserRole, ensure_permission
from app.core.security import generate_tokens, hash_password, verify_password
from app.schemas.auth import ChangeUserRoleResponse, SignUpInResponse
from app.schemas.envelope import ClientResponse, failure_from_exception
from app.services import users

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)

EMAIL_ALREADY_REGISTERED = "This email is already registered!"
USER_NOT_FOUND = "User not found!"
WRONG_PASSWORD = "Wrong password!"
NOT_ALLOWED_TO_CHANGE_ROLE = "You are not allowed to change the User Role"
USER_DOES_NOT_EXIST = "User does not exist"


class AuthService:
    """Stateless per call; every write runs inside its own transaction."""

    def __init__(self, session_factory: SessionFactory, settings: "Settings | None" = None) -> None:
        self._session_factory = session_factory
        self._settings = settings or get_settings()

    def sign_up(
        self,
        first_name: str,
        last_name: str,
        email: str,
        password: str,
        is_admin: bool = False,
    ) -> ClientResponse[SignUpInResponse]:
        """
        Register a new user and return a fresh token pair.

        is_admin creates an ADMIN account unless ALLOW_ADMIN_SIGNUP is disabled, in which case the
        account is created as REGULAR_USER.
        """
        try:
            with transaction(self._session_factory) as session:
                if users.find_by_email(session, email) is not None:
                    raise ControlledError(EMAIL_ALREADY_REGISTERED)

                role = UserRole.REGULAR_USER
                if is_admin:
                    if self._settings.ALLOW_ADMIN_SIGNUP:
                        role = UserRole.ADMIN
                    else:
                        logger.warning("Ignoring admin sign-up request for %s", email)

                try:
                    user = users.create_user(
                        session,
                        first_name=first_name,
                        last_name=last_name,
                        email=email,
                        password_hash=hash_password(password),
                        role=role,
                    )
                except IntegrityError as e:
                    # Lost a race with a concurrent sign-up; the unique index caught it.
                    raise ControlledError(EMAIL_ALREADY_REGISTERED) from e

                user_id = user.id
                data = SignUpInResponse(
                    first_name=user.first_name,
                    last_name=user.last_name,
                    email=user.email,
                    tokens=generate_tokens(user_id),
                )
            logger.info("User signed up: id=%s role=%s", user_id, role.value)
            return ClientResponse.ok(data, "Sign Up successfully!")
        except Exception as e:
            return failure_from_exception(e)

    def sign_in(self, email: str, password: str) -> ClientResponse[SignUpInResponse]:
        """Check credentials and return a fresh token pair. Read-only, no transaction."""
        try:
            with self._session_factory() as session:
                user = users.find_by_email(session, email)
                if user is None:
                    raise ControlledError(USER_NOT_FOUND)
                if not verify_password(password, user.password_hash):
                    raise ControlledError(WRONG_PASSWORD)
                data = SignUpInResponse(
                    first_name=user.first_name,
                    last_name=user.last_name,
                    email=user.email,
                    tokens=generate_tokens(user.id),
                )
            return ClientResponse.ok(data, "Sign In successfully!")
        except Exception as e:
            return failure_from_exception(e)

    def change_user_role(
        self,
        caller_id: str,
        email: str,
        role: UserRole,
    ) -> ClientResponse[ChangeUserRoleResponse]:
        """Set the role of the user with this email. Only an ADMIN caller may do this."""
        try:
            with transaction(self._session_factory) as session:
                caller = users.find_by_id(session, caller_id)
                ensure_permission(
                    caller.role if caller else None,
                    Action.CHANGE_USER_ROLE,
                    NOT_ALLOWED_TO_CHANGE_ROLE,
                )

                target = users.find_by_email(session, email)
                if target is None:
                    raise ControlledError(USER_DOES_NOT_EXIST)

                updated = users.set_role(session, target.id, role)
                if updated is None:
                    raise ControlledError(USER_DOES_NOT_EXIST)
                data = ChangeUserRoleResponse(email=email, new_role=UserRole(updated.role))
            logger.info("Role changed by %s: %s -> %s", caller_id, email, data.new_role.value)
            return ClientResponse.ok(data, "User role changed successfully!")
        except Exception as e:
            return failure_from_exception(e)
