"""Unit tests for app.core.config: defaults and validators."""

import unittest

from pydantic import ValidationError

from app.core.config import Settings


class TestSettingsDefaults(unittest.TestCase):
    def test_token_lifetimes(self) -> None:
        s = Settings()
        self.assertEqual(s.ACCESS_TOKEN_EXPIRE_MINUTES, 60 * 24)
        self.assertEqual(s.REFRESH_TOKEN_EXPIRE_MINUTES, 60 * 24 * 7)

    def test_admin_sign_up_honored_by_default(self) -> None:
        self.assertTrue(Settings(_env_file=None).ALLOW_ADMIN_SIGNUP)

    def test_admin_sign_up_can_be_disabled(self) -> None:
        self.assertFalse(Settings(ALLOW_ADMIN_SIGNUP=False).ALLOW_ADMIN_SIGNUP)


class TestSettingsValidation(unittest.TestCase):
    def test_rejects_non_postgres_url(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(DATABASE_URL="mysql://root@localhost/movies")

    def test_rejects_identical_jwt_secrets(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(JWT_ACCESS_SECRET="same", JWT_REFRESH_SECRET="same")

    def test_rejects_blank_jwt_secret(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(JWT_ACCESS_SECRET="   ")

    def test_star_wars_url_trailing_slash_stripped(self) -> None:
        s = Settings(STAR_WARS_URL="https://swapi.dev/api/")
        self.assertEqual(s.STAR_WARS_URL, "https://swapi.dev/api")

    def test_rejects_non_http_star_wars_url(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(STAR_WARS_URL="ftp://swapi.dev/api")

    def test_rejects_zero_token_lifetime(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(ACCESS_TOKEN_EXPIRE_MINUTES=0)


if __name__ == "__main__":
    unittest.main()
