"""
Create a user (e.g. first admin). Run from project root:
  python -m electroleed.scripts.create_user LOGIN PASSWORD [ROLE]
Example:
  python -m electroleed.scripts.create_user admin your-secure-password ADMIN
"""
import argparse
import logging
import sys

from electroleed.core.database import SessionLocal
from electroleed.core.errors import DuplicateLogin
from electroleed.core.security import LOGIN_MAX_LEN, PASSWORD_MAX_LEN, PASSWORD_MIN_LEN
from electroleed.models import Role
from electroleed.services.credentials import CredentialStore

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create an Electroleed user account.")
    parser.add_argument("login", help=f"Login (1-{LOGIN_MAX_LEN} chars)")
    parser.add_argument("password", help=f"Password ({PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} chars)")
    parser.add_argument(
        "role",
        nargs="?",
        default=Role.ADMIN.value,
        choices=[r.value for r in Role],
    )
    args = parser.parse_args(argv)

    login = args.login.strip()
    if not login or len(login) > LOGIN_MAX_LEN:
        print("Invalid login length.", file=sys.stderr)
        return 1
    if not (PASSWORD_MIN_LEN <= len(args.password) <= PASSWORD_MAX_LEN):
        print(
            f"Password must be {PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} characters.",
            file=sys.stderr,
        )
        return 1

    db = SessionLocal()
    try:
        CredentialStore(db).create(login, args.password, Role(args.role))
    except DuplicateLogin:
        print(f"User '{login}' already exists.", file=sys.stderr)
        return 1
    finally:
        db.close()
    logger.info("Created user '%s' with role '%s'.", login, args.role)
    return 0


if __name__ == "__main__":
    sys.exit(main())
