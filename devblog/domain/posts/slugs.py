# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re

_DISALLOWED = re.compile(r"[^a-z0-9\s_-]")
_SEPARATORS = re.compile(r"[\s_-]+")

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


def slugify(title: str) -> str:
    """Turn a title into a lower-case, hyphen-separated URL fragment.

    >>> slugify("  Hello, World!  ")
    'hello-world'
    """
    slug = title.lower().strip()
    slug = _DISALLOWED.sub("", slug)
    slug = _SEPARATORS.sub("-", slug)
    return slug.strip("-")


def is_valid_slug(value: str) -> bool:
    return bool(SLUG_PATTERN.match(value))
