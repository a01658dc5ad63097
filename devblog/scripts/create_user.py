# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Create an editor account from the command line."""

from __future__ import annotations

import argparse
import getpass
import sys

from pydantic import ValidationError

from devblog.infrastructure.container import container
from devblog.infrastructure.db import init_db
from devblog.interfaces.http.dto.auth import RegisterRequestDTO
from devblog.shared.errors import AppError
from devblog.shared.errors.validation import format_pydantic_errors
from devblog.shared.logging import setup_logging


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a DevBlog editor")
    parser.add_argument("email")
    parser.add_argument("--name", default=None)
    args = parser.parse_args(argv)

    password = getpass.getpass("Password: ")
    if password != getpass.getpass("Repeat password: "):
        print("Passwords do not match", file=sys.stderr)
        return 1

    try:
        dto = RegisterRequestDTO(email=args.email, password=password, name=args.name)
    except ValidationError as exc:
        for error in format_pydantic_errors(exc)["errors"]:
            print(f"{error['field']}: {error['message']}", file=sys.stderr)
        return 1

    setup_logging()
    init_db()
    try:
        user = container.register_user_use_case.execute(dto.email, dto.password, dto.name)
    except AppError as exc:
        print(exc.message or exc.code, file=sys.stderr)
        return 1
    print(f"Created editor {user.email} ({user.id})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
