"""
Create a user (e.g. the first admin). Run from project root:
  python -m app.scripts.create_user FIRST_NAME LAST_NAME EMAIL PASSWORD [role]
Example:
  python -m app.scripts.create_user Ada Admin admin@example.com your-secure-password ADMIN
"""
import argparse
import logging
import sys

from app.core.database import SessionLocal, transaction
from app.core.rbac import UserRole
from app.core.security import PASSWORD_MAX_LEN, PASSWORD_MIN_LEN, hash_password
from app.services import users

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a user directly (bootstrap admins).")
    parser.add_argument("first_name")
    parser.add_argument("last_name")
    parser.add_argument("email")
    parser.add_argument("password", help=f"Password ({PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} chars)")
    parser.add_argument(
        "role",
        nargs="?",
        default=UserRole.REGULAR_USER.value,
        choices=[r.value for r in UserRole],
    )
    args = parser.parse_args(argv)

    email = args.email.strip()
    if not email or "@" not in email:
        print("Invalid email.", file=sys.stderr)
        return 1
    if not (PASSWORD_MIN_LEN <= len(args.password) <= PASSWORD_MAX_LEN):
        print(f"Password must be {PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} characters.", file=sys.stderr)
        return 1

    with transaction(SessionLocal) as session:
        if users.find_by_email(session, email) is not None:
            print(f"User '{email}' already exists.", file=sys.stderr)
            return 1
        users.create_user(
            session,
            first_name=args.first_name.strip(),
            last_name=args.last_name.strip(),
            email=email,
            password_hash=hash_password(args.password),
            role=UserRole(args.role),
        )
    logger.info("Created user '%s' with role '%s'.", email, args.role)
    return 0


if __name__ == "__main__":
    sys.exit(main())
