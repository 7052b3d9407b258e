#!/usr/bin/env python3
"""Mint an auth token for local development.

Usage:
    python scripts/issue_token.py --name "Ada Lovelace"
    python scripts/issue_token.py --user-id 5f0c... --name Ada

Send the printed token as ``Authorization: Bearer <token>`` or in the
``auth_token`` cookie.
"""

import argparse
import sys
from uuid import UUID, uuid4

from qanda.config import Settings
from qanda.domain.service import JWTService
from qanda.domain.value import UserId


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--user-id", type=UUID, default=None, help="defaults to a new id")
    parser.add_argument("--name", default=None, help="display name carried in the token")
    args = parser.parse_args()

    settings = Settings()
    jwt_service = JWTService(auth_settings=settings.auth)

    user_id = UserId(args.user_id or uuid4())
    print(jwt_service.create_token(user_id, name=args.name))
    return 0


if __name__ == "__main__":
    sys.exit(main())
