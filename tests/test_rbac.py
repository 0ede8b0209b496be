"""Unit tests for app.core.rbac: the role -> action policy."""

import unittest

from app.core.exceptions import ControlledError
from app.core.rbac import RBAC_POLICY, Action, UserRole, check_permission, ensure_permission

WRITE_ACTIONS = (
    Action.CREATE_MOVIE,
    Action.UPDATE_MOVIE,
    Action.DELETE_MOVIE,
    Action.SEED_MOVIES,
    Action.CHANGE_USER_ROLE,
)


class TestCheckPermission(unittest.TestCase):
    def test_admin_may_write(self) -> None:
        for action in WRITE_ACTIONS:
            self.assertTrue(check_permission(UserRole.ADMIN, action), action)

    def test_regular_user_may_not_write(self) -> None:
        for action in WRITE_ACTIONS:
            self.assertFalse(check_permission(UserRole.REGULAR_USER, action), action)

    def test_single_movie_fetch_is_regular_user_only(self) -> None:
        self.assertTrue(check_permission(UserRole.REGULAR_USER, Action.GET_MOVIE))
        self.assertFalse(check_permission(UserRole.ADMIN, Action.GET_MOVIE))

    def test_regular_user_may_only_fetch_single_movie(self) -> None:
        self.assertEqual(RBAC_POLICY[UserRole.REGULAR_USER], [Action.GET_MOVIE])

    def test_accepts_stored_string_role(self) -> None:
        self.assertTrue(check_permission("ADMIN", Action.CREATE_MOVIE))

    def test_unknown_or_missing_role_gets_nothing(self) -> None:
        for action in Action:
            self.assertFalse(check_permission("SUPER_ADMIN", action))
            self.assertFalse(check_permission(None, action))

    def test_policy_covers_every_role(self) -> None:
        self.assertEqual(set(RBAC_POLICY), set(UserRole))


class TestEnsurePermission(unittest.TestCase):
    def test_allowed_returns_none(self) -> None:
        self.assertIsNone(ensure_permission(UserRole.ADMIN, Action.SEED_MOVIES, "nope"))

    def test_denied_raises_controlled_400(self) -> None:
        with self.assertRaises(ControlledError) as ctx:
            ensure_permission(UserRole.REGULAR_USER, Action.SEED_MOVIES, "nope")
        self.assertEqual(ctx.exception.message, "nope")
        self.assertEqual(ctx.exception.status_code, 400)


if __name__ == "__main__":
    unittest.main()
