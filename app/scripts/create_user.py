"""
Create a user directly in the store (e.g. the first SUPERADMIN). Run from project root:
  python -m app.scripts.create_user USERNAME PASSWORD [role]
Example:
  python -m app.scripts.create_user root_admin 'Your-Secure-Pass1' SUPERADMIN
"""
import argparse
import logging
import sys

from pydantic import ValidationError

from app.core.database import SessionLocal
from app.core.errors import Conflict
from app.models import UserRole
from app.schemas.auth import SignUpRequest
from app.services.authentication import sign_up

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Taskgate user without the HTTP API.")
    parser.add_argument("username", help="Username (3-50 chars: letters, digits, '_', '.', '-')")
    parser.add_argument("password", help="Password (8-128 chars, mixed case, digit or symbol)")
    parser.add_argument(
        "role",
        nargs="?",
        default=UserRole.WORKER.value,
        choices=[r.value for r in UserRole],
    )
    args = parser.parse_args(argv)

    try:
        body = SignUpRequest(
            username=args.username.strip(),
            password=args.password,
            role=UserRole(args.role),
        )
    except ValidationError as e:
        for err in e.errors():
            print(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        user = sign_up(db, body)
    except Conflict:
        print(f"User '{body.username}' already exists.", file=sys.stderr)
        return 1
    finally:
        db.close()
    print(f"Created user '{user.username}' with role '{user.role.value}'.")
    return 0


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )
    sys.exit(main())
