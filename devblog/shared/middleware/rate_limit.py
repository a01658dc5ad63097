# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass
from functools import wraps

from flask import Request, request

from devblog.shared.config import load_config
from devblog.shared.errors import RateLimitedError
from devblog.shared.logging import logger


@dataclass
class Bucket:
    timestamps: deque[float]


class InMemoryRateLimiter:
    def __init__(self, limit: int, window_seconds: float) -> None:
        self._limit = max(1, int(limit))
        self._window = max(0.1, float(window_seconds))
        self._buckets: dict[str, Bucket] = {}

    def allow(self, key: str) -> bool:
        now = time.monotonic()
        self._evict_expired(now)
        bucket = self._buckets.setdefault(key, Bucket(deque(maxlen=self._limit)))
        if len(bucket.timestamps) >= self._limit:
            return False
        bucket.timestamps.append(now)
        return True

    def _evict_expired(self, now: float) -> None:
        for key in list(self._buckets):
            timestamps = self._buckets[key].timestamps
            while timestamps and (now - timestamps[0]) > self._window:
                timestamps.popleft()
            if not timestamps:
                del self._buckets[key]

    def __len__(self) -> int:
        return len(self._buckets)


def _client_key(req: Request) -> str:
    forwarded = req.headers.get("X-Forwarded-For", "").split(",")[0].strip()
    return forwarded or (req.remote_addr or "unknown")


def rate_limit(limit: int | None = None, window_seconds: float | None = None):
    config = load_config()
    limiter = InMemoryRateLimiter(
        limit or config.security.rate_limit_requests,
        window_seconds or config.security.rate_limit_window,
    )

    def decorator(f: Callable):
        @wraps(f)
        def wrapper(*args, **kwargs):
            if load_config().security.enable_rate_limit:
                key = f"{request.path}:{_client_key(request)}"
                if not limiter.allow(key):
                    logger.warning(f"rate_limit: blocked key={key}")
                    raise RateLimitedError()
            return f(*args, **kwargs)

        return wrapper

    return decorator


__all__ = ["InMemoryRateLimiter", "rate_limit"]
