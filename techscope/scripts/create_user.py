"""
Create an account from the command line (the only way to create an admin). Run from project root:
  python -m techscope.scripts.create_user NAME EMAIL PASSWORD [--admin]
Example:
  python -m techscope.scripts.create_user "Site Admin" admin@mail.com your-secure-password --admin
"""
import argparse
import logging
import sys

from techscope.core.config import get_settings
from techscope.core.database import SessionLocal
from techscope.core.logging_config import configure_logging
from techscope.services.accounts import register_user
from techscope.services.errors import AccountError
from techscope.services.user_store import SqlUserStore

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Tech Scope user account.")
    parser.add_argument("name", help="Full name (5-50 chars)")
    parser.add_argument("email", help="Email address (max 255 chars)")
    parser.add_argument("password", help="Password (5-255 chars)")
    parser.add_argument("--admin", action="store_true", help="Grant the isAdmin flag")
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)

    db = SessionLocal()
    try:
        result = register_user(
            SqlUserStore(db),
            {"name": args.name, "email": args.email, "password": args.password},
            settings,
            is_admin=args.admin,
        )
    except AccountError as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        db.close()

    role = "admin" if args.admin else "user"
    print(f"Created {role} '{result.user.email}' with id {result.user.id}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
