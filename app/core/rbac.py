"""Role-based access control: roles, actions and the role -> allowed actions policy."""

from enum import Enum

from app.core.exceptions import ControlledError


class UserRole(str, Enum):
    ADMIN = "ADMIN"
    REGULAR_USER = "REGULAR_USER"


class Action(str, Enum):
    GET_MOVIE = "get_movie"
    CREATE_MOVIE = "create_movie"
    UPDATE_MOVIE = "update_movie"
    DELETE_MOVIE = "delete_movie"
    SEED_MOVIES = "seed_movies"
    CHANGE_USER_ROLE = "change_user_role"


RBAC_POLICY: dict[UserRole, list[Action]] = {
    # Listing the catalog is open to any authenticated caller and is not an action here.
    # Admin manages the catalog and user roles. Single-movie lookup is reserved
    # for regular users.
    UserRole.ADMIN: [
        Action.CREATE_MOVIE,
        Action.UPDATE_MOVIE,
        Action.DELETE_MOVIE,
        Action.SEED_MOVIES,
        Action.CHANGE_USER_ROLE,
    ],
    UserRole.REGULAR_USER: [
        Action.GET_MOVIE,
    ],
}


def check_permission(role: UserRole | str | None, action: Action) -> bool:
    """Return True if the role is allowed to perform the action. Unknown roles get nothing."""
    try:
        resolved = UserRole(role)
    except ValueError:
        return False
    return action in RBAC_POLICY.get(resolved, [])


def ensure_permission(role: UserRole | str | None, action: Action, message: str) -> None:
    """Raise ControlledError(message, 400) when the role may not perform the action."""
    if not check_permission(role, action):
        raise ControlledError(message, 400)
