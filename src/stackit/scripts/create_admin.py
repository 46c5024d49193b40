"""Bootstrap an administrator account from the command line."""
from __future__ import annotations

import argparse
import getpass
import sys

from stackit.core.settings import settings
from stackit.db.session import SessionLocal
from stackit.models.user import ROLE_ADMIN, User
from stackit.services.user_service import AccountError, create_account


def create_admin(username: str, email: str, password: str) -> User:
    """Create a verified admin with the configured starting reputation."""
    db = SessionLocal()
    try:
        return create_account(
            db,
            username=username,
            email=email,
            password=password,
            role=ROLE_ADMIN,
            is_verified=True,
            reputation=settings.admin_starting_reputation,
        )
    finally:
        db.close()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a StackIt administrator account")
    parser.add_argument("--username", required=True)
    parser.add_argument("--email", required=True)
    parser.add_argument(
        "--password",
        default=None,
        help="Account password (prompted for when omitted)",
    )
    args = parser.parse_args(argv)

    password = args.password or getpass.getpass("Password: ")
    try:
        user = create_admin(args.username, args.email, password)
    except AccountError as exc:
        print(f"[create_admin] ERROR: {exc}", file=sys.stderr)
        return 1

    print(f"[create_admin] created admin {user.username} (id={user.id})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
