"""Tests for the app.scripts.create_user bootstrap CLI."""

import unittest
from unittest.mock import patch

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.security import verify_password
from app.models import Base
from app.scripts.create_user import main
from app.services import users


def _session_factory() -> sessionmaker:
    """In-memory SQLite database with the app schema."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine, autoflush=False)


class TestCreateUserCli(unittest.TestCase):
    def setUp(self) -> None:
        self.factory = _session_factory()
        for target, value in (
            ("app.scripts.create_user.SessionLocal", self.factory),
            ("app.core.security.BCRYPT_ROUNDS", 4),
        ):
            patcher = patch(target, value)
            patcher.start()
            self.addCleanup(patcher.stop)

    def test_creates_admin(self) -> None:
        code = main(["Ada", "Admin", "ada@rebels.io", "secret-pass", "ADMIN"])
        self.assertEqual(code, 0)
        with self.factory() as session:
            user = users.find_by_email(session, "ada@rebels.io")
            self.assertEqual(user.role, "ADMIN")
            self.assertEqual(user.first_name, "Ada")
            self.assertTrue(verify_password("secret-pass", user.password_hash))

    def test_role_defaults_to_regular_user(self) -> None:
        self.assertEqual(main(["Han", "Solo", "han@rebels.io", "secret-pass"]), 0)
        with self.factory() as session:
            self.assertEqual(users.find_by_email(session, "han@rebels.io").role, "REGULAR_USER")

    def test_refuses_duplicate_email(self) -> None:
        main(["Han", "Solo", "han@rebels.io", "secret-pass"])
        self.assertEqual(main(["Han", "Solo", "han@rebels.io", "other-pass"]), 1)

    def test_rejects_invalid_email(self) -> None:
        self.assertEqual(main(["Han", "Solo", "not-an-email", "secret-pass"]), 1)


if __name__ == "__main__":
    unittest.main()
