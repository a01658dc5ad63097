# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Load the demo editor and posts into the configured database."""

from __future__ import annotations

import argparse
import os

from devblog.infrastructure.container import container
from devblog.infrastructure.db import init_db
from devblog.infrastructure.seed import DEMO_EMAIL, DEMO_PASSWORD, seed_demo_data
from devblog.shared.logging import setup_logging


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the DevBlog database with demo data")
    parser.add_argument(
        "--password",
        default=os.environ.get("SEED_PASSWORD", DEMO_PASSWORD),
        help="Password for the demo editor (only used when the account is created)",
    )
    args = parser.parse_args()

    setup_logging()
    init_db()
    result = seed_demo_data(container.password_hasher, password=args.password)
    print(f"Seeded {DEMO_EMAIL}: user created={result.created_user}, posts created={result.created_posts}")


if __name__ == "__main__":
    main()
